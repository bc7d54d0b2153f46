from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from yultimate.models.common import as_utc, utcnow
from yultimate.models.event_model import EventType

class EventBase(BaseModel):
    name: str = Field(..., min_length=3, description="Event name must be at least 3 characters.")
    description: str = Field(..., min_length=10, description="Description must be at least 10 characters.")
    date: datetime
    organization_id: int
    type: EventType = EventType.MEETUP

    @field_validator("date")
    @classmethod
    def date_not_in_past(cls, v):
        v = as_utc(v)
        if v < utcnow():
            raise ValueError("Event date cannot be in the past.")
        return v

class EventCreate(EventBase):
    venue_id: int

class EventUpdate(EventBase):
    # The edit form takes a venue by name; unknown names create a new venue
    venue_name: str = Field(..., min_length=3)

class PlacementResult(BaseModel):
    team_id: str = Field(..., min_length=1)
    spirit_score: float = Field(default=10, ge=0, le=15)

class ResultsSubmission(BaseModel):
    first: PlacementResult
    second: PlacementResult
    third: PlacementResult
    highlights: str = Field(..., min_length=10)

    @model_validator(mode="after")
    def distinct_teams(self):
        team_ids = [self.first.team_id, self.second.team_id, self.third.team_id]
        if len(set(team_ids)) != len(team_ids):
            raise ValueError("A team can only take one podium place.")
        return self

class RegistrationToggleResult(BaseModel):
    event_id: int
    user_id: str
    registered: bool

class EventQrPayload(BaseModel):
    eventId: int
    eventName: str
    userName: Optional[str] = None
