import pytest
from pydantic import ValidationError

from yultimate.core.config import settings
from yultimate.schemas.coaching_schemas import CoachingCenterCreate
from yultimate.services.coaching_service import CoachingService, format_fee
from yultimate.services.state import AppState

@pytest.fixture
def coaching_service():
    return CoachingService(AppState.seeded())

def make_center_create(**overrides):
    data = dict(
        name="Night Owls Ultimate",
        specialty="Evening Drills",
        location="Mysuru",
        description="Floodlit sessions for working adults.",
        fee=1200,
        schedule="Tue, Thu 8-10 PM",
    )
    data.update(overrides)
    return CoachingCenterCreate(**data)


class TestCoachingService:

    def test_add_coaching_center(self, coaching_service: CoachingService):
        center = coaching_service.add_coaching_center(make_center_create())
        assert center.id == 4
        assert center.participants == []

    def test_fee_must_not_be_negative(self):
        with pytest.raises(ValidationError):
            make_center_create(fee=-1)

    def test_toggle_enrollment_twice_is_identity(self, coaching_service: CoachingService):
        original = list(coaching_service.get_center(3).participants)
        coaching_service.toggle_coaching_center_registration(3, "U003")
        assert coaching_service.centers_for_user("U003")[-1].id == 3
        restored = coaching_service.toggle_coaching_center_registration(3, "U003")
        assert restored.participants == original

    def test_toggle_unknown_center(self, coaching_service: CoachingService):
        assert coaching_service.toggle_coaching_center_registration(99, "U003") is None

    def test_center_detail_lists_enrolled_users(self, coaching_service: CoachingService):
        detail = coaching_service.get_center_detail(3)
        assert [u.name for u in detail.participants] == ["Jane Doe", "John Smith"]
        assert detail.fee_display == "INR 1,800"
        assert coaching_service.get_center_detail(99) is None

    def test_format_fee(self):
        assert format_fee(2500, currency="USD") == "USD 2,500"
        assert format_fee(99.5, currency="INR") == "INR 99.50"

    def test_format_fee_defaults_to_configured_currency(self):
        assert format_fee(500) == f"{settings.FEE_CURRENCY} 500"
