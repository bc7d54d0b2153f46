from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from yultimate.models.common import Coordinates, EventId, UserId, as_utc

class EventType(str, Enum):
    TOURNAMENT = "Tournament"
    WORKSHOP = "Workshop"
    MEETUP = "Meetup"

class Winners(BaseModel):
    first: str
    second: str
    third: str

class EventModel(BaseModel):
    id: EventId
    name: str
    date: datetime
    description: str
    venue_id: int
    organization_id: int
    type: EventType
    participants: List[UserId] = Field(default_factory=list) # User ids, unique
    winners: Optional[Winners] = None
    highlights: Optional[str] = None

    class Config:
        from_attributes = True
        use_enum_values = True

    @field_validator("date")
    @classmethod
    def date_is_utc(cls, v):
        return as_utc(v)

class Venue(BaseModel):
    id: int
    name: str
    location: str
    coordinates: Optional[Coordinates] = None # Venues added from the edit form have no position yet

class Organization(BaseModel):
    id: int
    name: str
    organizers: List[UserId] = Field(default_factory=list)

class GalleryImage(BaseModel):
    id: str
    url: str
    description: str = ""
    hint: Optional[str] = None
