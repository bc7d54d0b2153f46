import pytest
from pydantic import ValidationError

from yultimate.models import AdminUser, CoachUser, OrganizerUser, ParticipantUser, Role
from yultimate.schemas.user_schemas import (
    CoachRegistration,
    OrganizationCreate,
    OrganizerRegistration,
    ParticipantRegistration,
)
from yultimate.services.state import AppState
from yultimate.services.user_service import UserService, to_base36

FIXED_CLOCK = 1_700_000_000.0 # seconds

@pytest.fixture
def state():
    return AppState.seeded()

@pytest.fixture
def user_service(state):
    return UserService(state, clock=lambda: FIXED_CLOCK)


class TestUserService:

    def test_to_base36(self):
        assert to_base36(0) == "0"
        assert to_base36(35) == "z"
        assert to_base36(36) == "10"
        with pytest.raises(ValueError):
            to_base36(-1)

    def test_generate_user_id_uses_role_prefix(self, user_service: UserService):
        expected_suffix = to_base36(int(FIXED_CLOCK * 1000))[-6:]
        assert user_service.generate_user_id(Role.PARTICIPANT) == f"P{expected_suffix}"
        assert user_service.generate_user_id(Role.ORGANIZER).startswith("O")
        assert user_service.generate_user_id(Role.COACH).startswith("C")
        assert user_service.generate_user_id().startswith("U")

    def test_generate_user_id_skips_taken_ids(self, user_service: UserService):
        first = user_service.add_participant(ParticipantRegistration(
            full_name="Meera Iyer", email="meera@example.com", phone="9876543210", location="Mysuru",
        ))
        second = user_service.add_participant(ParticipantRegistration(
            full_name="Kiran Das", email="kiran@example.com", phone="9876543211", location="Mysuru",
        ))
        assert first.id != second.id

    def test_add_participant(self, user_service: UserService, state: AppState):
        user = user_service.add_participant(ParticipantRegistration(
            full_name="Meera Iyer", email="meera@example.com", phone="9876543210", location="Mysuru",
        ))
        assert isinstance(user, ParticipantUser)
        assert user.id.startswith("P")
        assert user.qr_code == f"QR-{user.id}"
        assert user.registered_events == []
        assert state.users[-1] == user

    def test_add_user_duplicate_email_is_case_insensitive(self, user_service: UserService):
        with pytest.raises(ValueError, match="already exists"):
            user_service.add_participant(ParticipantRegistration(
                full_name="Another Jane", email="JANE@yultimate.org", phone="9876543210", location="Mysuru",
            ))

    def test_add_user_from_dict(self, user_service: UserService):
        user = user_service.add_user({"id": "A123", "role": "Admin", "name": "Second Admin", "email": "admin2@example.com"})
        assert isinstance(user, AdminUser)

    def test_add_organizer_creates_organization(self, user_service: UserService, state: AppState):
        organizer = user_service.add_organizer(OrganizerRegistration(
            personal_name="Farah Khan",
            org_name="Disc Dreamers",
            email="farah@example.com",
            phone="9123456780",
            password="secret1",
            confirm_password="secret1",
        ))
        assert isinstance(organizer, OrganizerUser)
        assert organizer.org_name == "Disc Dreamers"
        organization = state.organizations[-1]
        assert organization.id == 3
        assert organization.name == "Disc Dreamers"
        assert organization.organizers == [organizer.id]

    def test_organizer_passwords_must_match(self):
        with pytest.raises(ValidationError, match="Passwords don't match"):
            OrganizerRegistration(
                personal_name="Farah Khan",
                org_name="Disc Dreamers",
                email="farah@example.com",
                phone="9123456780",
                password="secret1",
                confirm_password="secret2",
            )

    def test_passwords_are_not_kept(self):
        registration = OrganizerRegistration(
            personal_name="Farah Khan",
            org_name="Disc Dreamers",
            email="farah@example.com",
            phone="9123456780",
            password="secret1",
            confirm_password="secret1",
        )
        dumped = registration.model_dump()
        assert "password" not in dumped
        assert "confirm_password" not in dumped

    def test_add_coach(self, user_service: UserService):
        coach = user_service.add_coach(CoachRegistration(
            full_name="Coach Vikram",
            email="vikram@example.com",
            phone="9000000001",
            communities=["VV Puram"],
            experience_years=3,
            password="secret1",
            confirm_password="secret1",
        ))
        assert isinstance(coach, CoachUser)
        assert coach.id.startswith("C")
        assert coach.communities == ["VV Puram"]

    def test_coach_needs_a_community(self):
        with pytest.raises(ValidationError, match="at least one community"):
            CoachRegistration(
                full_name="Coach Vikram",
                email="vikram@example.com",
                phone="9000000001",
                communities=[],
                password="secret1",
                confirm_password="secret1",
            )

    def test_phone_must_have_ten_digits(self):
        with pytest.raises(ValidationError):
            ParticipantRegistration(full_name="Meera Iyer", email="meera@example.com", phone="12345", location="Mysuru")

    def test_first_user_with_role(self, user_service: UserService):
        assert user_service.first_user_with_role(Role.ORGANIZER).id == "U002"
        assert user_service.first_user_with_role(Role.COACH).name == "Coach Ramesh"

    def test_add_organization(self, user_service: UserService):
        organization = user_service.add_organization(OrganizationCreate(name="Hucksters United"), organizers=["U006"])
        assert organization.id == 3
        assert [o.id for o in user_service.organizations_for_user("U006")] == [1, 2, 3]

    def test_organization_name_min_length(self):
        with pytest.raises(ValidationError):
            OrganizationCreate(name="ab")
