import json
import pytest

from yultimate.core.config import settings
from yultimate.models import CoachUser, ParticipantUser, Role
from yultimate.services.auth_service import AuthService
from yultimate.services.state import AppState
from yultimate.services.user_service import UserService

STORAGE_KEY = "test_user"

@pytest.fixture
def storage():
    return {}

@pytest.fixture
def auth_service(storage):
    return AuthService(storage, UserService(AppState.seeded()), storage_key=STORAGE_KEY)


class TestAuthService:

    def test_login_picks_first_user_with_role(self, auth_service: AuthService, storage):
        user = auth_service.login(Role.PARTICIPANT)
        assert user.id == "U003"
        assert json.loads(storage[STORAGE_KEY])["id"] == "U003"

    def test_current_user_round_trips_variant(self, auth_service: AuthService):
        auth_service.login(Role.COACH)
        current = auth_service.current_user()
        assert isinstance(current, CoachUser)
        assert current.communities == ["VV Puram"]

    def test_login_without_matching_user(self, storage):
        state = AppState.seeded()
        state.users = [u for u in state.users if u.role != "Coach"]
        auth_service = AuthService(storage, UserService(state), storage_key=STORAGE_KEY)
        assert auth_service.login(Role.COACH) is None
        assert storage == {}

    def test_login_from_registration(self, auth_service: AuthService):
        newcomer = ParticipantUser(id="Pabc123", name="New Player", email="new@example.com", qr_code="QR-Pabc123")
        auth_service.login_from_registration(newcomer)
        assert auth_service.current_user() == newcomer

    def test_logout(self, auth_service: AuthService, storage):
        auth_service.login(Role.ADMIN)
        auth_service.logout()
        assert STORAGE_KEY not in storage
        assert auth_service.current_user() is None

    @pytest.mark.parametrize("raw", ["not json", '{"id": "X"}', '{"role": "Wizard", "id": "X", "name": "X", "email": "x@example.com"}', "[]"])
    def test_malformed_record_is_discarded(self, auth_service: AuthService, storage, raw):
        storage[STORAGE_KEY] = raw
        assert auth_service.current_user() is None
        assert STORAGE_KEY not in storage

    def test_default_storage_key_comes_from_settings(self):
        storage = {}
        auth_service = AuthService(storage, UserService(AppState.seeded()))
        auth_service.login(Role.ADMIN)
        assert list(storage) == [settings.SESSION_USER_KEY]
