import json
import logging
from typing import MutableMapping, Optional

from pydantic import ValidationError

from yultimate.core.config import settings
from yultimate.models import Role, user_adapter
from yultimate.services.user_service import UserService

logger = logging.getLogger(__name__)

class AuthService:
    """Keeps the current user in client-side storage.

    There are no credentials: logging in picks the first seeded user of a role.
    ``storage`` is the client's key/value store (the session cookie in the web
    app) and only ever holds a single JSON-encoded user record.
    """

    def __init__(self, storage: MutableMapping, user_service: UserService, storage_key: Optional[str] = None):
        self.storage = storage
        self.user_service = user_service
        self.storage_key = storage_key or settings.SESSION_USER_KEY

    def login(self, role: Role):
        user = self.user_service.first_user_with_role(role)
        if not user:
            logger.warning("No user with role %s to log in as", role)
            return None
        self._store(user)
        logger.info("Logged in as %s (%s)", user.id, user.role)
        return user

    def login_from_registration(self, user):
        # Newly registered users are trusted as-is, without a lookup.
        self._store(user)
        logger.info("Logged in newly registered user %s", user.id)
        return user

    def logout(self) -> None:
        if self.storage.pop(self.storage_key, None) is not None:
            logger.info("Logged out")

    def current_user(self):
        raw = self.storage.get(self.storage_key)
        if raw is None:
            return None
        try:
            return user_adapter.validate_python(json.loads(raw))
        except (TypeError, ValueError, ValidationError) as e:
            # Corrupt or outdated record: drop it and carry on without a session
            logger.debug("Discarding malformed stored user: %s", e)
            self.storage.pop(self.storage_key, None)
            return None

    def _store(self, user) -> None:
        self.storage[self.storage_key] = json.dumps(user_adapter.dump_python(user, mode="json"))
