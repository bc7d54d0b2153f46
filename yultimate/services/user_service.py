import logging
import string
import time
from typing import Callable, List, Optional

from yultimate.models import (
    CoachUser,
    Organization,
    OrganizerUser,
    ParticipantUser,
    Role,
    user_adapter,
)
from yultimate.models.user_model import ROLE_ID_PREFIXES
from yultimate.schemas.user_schemas import (
    CoachRegistration,
    OrganizationCreate,
    OrganizerRegistration,
    ParticipantRegistration,
)
from yultimate.services.state import AppState, next_int_id

logger = logging.getLogger(__name__)

BASE36_DIGITS = string.digits + string.ascii_lowercase

def to_base36(value: int) -> str:
    if value < 0:
        raise ValueError("Only non-negative values can be encoded.")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(BASE36_DIGITS[remainder])
    return "".join(reversed(digits))

class UserService:
    def __init__(self, state: AppState, clock: Callable[[], float] = time.time):
        self.state = state
        self.clock = clock

    def list_users(self) -> list:
        return list(self.state.users)

    def get_user(self, user_id: str):
        return self.state.find_user(user_id)

    def get_user_by_email(self, email: str):
        wanted = email.lower()
        for user in self.state.users:
            if user.email.lower() == wanted:
                return user
        return None

    def first_user_with_role(self, role: Role):
        return next((u for u in self.state.users if u.role == role), None)

    def generate_user_id(self, role: Optional[Role] = None) -> str:
        """``<RolePrefix><base36 millisecond timestamp>``, last six digits, unique within the state."""
        prefix = ROLE_ID_PREFIXES[role]
        millis = int(self.clock() * 1000)
        while True:
            candidate = f"{prefix}{to_base36(millis)[-6:]}"
            if not self.state.find_user(candidate):
                return candidate
            millis += 1

    def add_user(self, user_data):
        """Appends a fully built user of any role. Email must be unique."""
        user = user_adapter.validate_python(user_data) if isinstance(user_data, dict) else user_data

        if self.get_user_by_email(user.email):
            raise ValueError(f"User with email {user.email} already exists.")
        if self.state.find_user(user.id):
            raise ValueError(f"User with ID {user.id} already exists.")

        self.state.users.append(user)
        logger.info("Added %s user %s", user.role, user.id)
        return user

    def add_participant(self, data: ParticipantRegistration) -> ParticipantUser:
        user_id = self.generate_user_id(Role.PARTICIPANT)
        participant = ParticipantUser(
            id=user_id,
            name=data.full_name,
            email=data.email,
            phone=data.phone,
            location=data.location,
            registered_events=[],
            qr_code=f"QR-{user_id}",
        )
        return self.add_user(participant)

    def add_organizer(self, data: OrganizerRegistration) -> OrganizerUser:
        organizer = OrganizerUser(
            id=self.generate_user_id(Role.ORGANIZER),
            name=data.personal_name,
            email=data.email,
            phone=data.phone,
            org_name=data.org_name,
            events=[],
        )
        self.add_user(organizer)
        # Registering an organizer also founds their organization
        self.add_organization(OrganizationCreate(name=data.org_name), organizers=[organizer.id])
        return organizer

    def add_coach(self, data: CoachRegistration) -> CoachUser:
        coach = CoachUser(
            id=self.generate_user_id(Role.COACH),
            name=data.full_name,
            email=data.email,
            phone=data.phone,
            communities=data.communities,
            sessions=[],
            experience_years=data.experience_years,
        )
        return self.add_user(coach)

    # --- Organizations ---

    def list_organizations(self) -> List[Organization]:
        return list(self.state.organizations)

    def add_organization(self, data: OrganizationCreate, organizers: Optional[List[str]] = None) -> Organization:
        organization = Organization(
            id=next_int_id(self.state.organizations),
            name=data.name,
            organizers=list(organizers or []),
        )
        self.state.organizations.append(organization)
        logger.info("Created organization %s (%s)", organization.id, organization.name)
        return organization

    def organizations_for_user(self, user_id: str) -> List[Organization]:
        return [o for o in self.state.organizations if user_id in o.organizers]
