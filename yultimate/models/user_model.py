from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, EmailStr, Field, TypeAdapter

from yultimate.models.common import EventId, UserId

class Role(str, Enum):
    ADMIN = "Admin"
    ORGANIZER = "Organizer"
    PARTICIPANT = "Participant"
    COACH = "Coach"

class UserBase(BaseModel):
    id: UserId
    name: str = Field(min_length=1)
    email: EmailStr

    class Config:
        from_attributes = True

class AdminUser(UserBase):
    role: Literal["Admin"] = "Admin"

class OrganizerUser(UserBase):
    role: Literal["Organizer"] = "Organizer"
    phone: Optional[str] = None
    org_name: Optional[str] = None
    events: List[EventId] = Field(default_factory=list)

class ParticipantUser(UserBase):
    role: Literal["Participant"] = "Participant"
    phone: Optional[str] = None
    location: Optional[str] = None
    registered_events: List[EventId] = Field(default_factory=list)
    qr_code: Optional[str] = None

class CoachUser(UserBase):
    role: Literal["Coach"] = "Coach"
    phone: Optional[str] = None
    communities: List[str] = Field(default_factory=list)
    sessions: List[str] = Field(default_factory=list)
    experience_years: int = Field(default=0, ge=0)

# Tagged on "role": each variant only carries the fields of its own role.
User = Annotated[
    Union[AdminUser, OrganizerUser, ParticipantUser, CoachUser],
    Field(discriminator="role"),
]

user_adapter = TypeAdapter(User)

ROLE_ID_PREFIXES = {
    None: "U",
    Role.PARTICIPANT: "P",
    Role.ORGANIZER: "O",
    Role.COACH: "C",
    Role.ADMIN: "A",
}
