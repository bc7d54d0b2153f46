from datetime import datetime
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, Field

from yultimate.models import Alert, CoachingCenter, EventModel, Organization, Session, User

class GenderSlice(BaseModel):
    name: str
    value: int

class CommunityStats(BaseModel):
    name: str
    children: int
    sessions: int = 0
    avg_attendance: float = 0.0

class AdminCounts(BaseModel):
    users: int
    children: int
    events: int
    sessions: int

class AdminDashboard(BaseModel):
    role: Literal["Admin"] = "Admin"
    counts: AdminCounts
    events: List[EventModel]
    users: List[User]
    gender: List[GenderSlice]
    communities: List[CommunityStats]
    session_dates: List[datetime]
    alerts: List[Alert]

class OrganizerDashboard(BaseModel):
    role: Literal["Organizer"] = "Organizer"
    organizations: List[Organization]
    events: List[EventModel]
    total_participants: int

class ParticipantDashboard(BaseModel):
    role: Literal["Participant"] = "Participant"
    upcoming_events: List[EventModel]
    past_events: List[EventModel]
    coaching_centers: List[CoachingCenter]

class CoachDashboard(BaseModel):
    role: Literal["Coach"] = "Coach"
    upcoming_sessions: List[Session]
    attendance_percentage: float
    total_children: int
    alerts: List[Alert]

Dashboard = Annotated[
    Union[AdminDashboard, OrganizerDashboard, ParticipantDashboard, CoachDashboard],
    Field(discriminator="role"),
]
