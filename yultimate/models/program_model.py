from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator

from yultimate.models.common import ChildId, Coordinates, SessionId, as_utc

class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"

class SessionStatus(str, Enum):
    COMPLETED = "completed"
    UPCOMING = "upcoming"

class AssessmentType(str, Enum):
    BASELINE = "Baseline"
    ENDLINE = "Endline"

class AlertType(str, Enum):
    DESTRUCTIVE = "destructive"
    DEFAULT = "default"

class Child(BaseModel):
    """A programme beneficiary. Children are not platform accounts."""
    id: ChildId
    name: str
    gender: Gender
    age: int = Field(ge=0)
    community: str
    school: str

    class Config:
        use_enum_values = True

class Community(BaseModel):
    name: str
    coordinates: Coordinates
    children: int = Field(ge=0)

class Session(BaseModel):
    id: SessionId
    date: datetime
    community: str
    coach: str # Coach display name, matched against CoachUser.name
    participants: List[ChildId] = Field(default_factory=list)
    status: SessionStatus

    class Config:
        use_enum_values = True

    @field_validator("date")
    @classmethod
    def date_is_utc(cls, v):
        return as_utc(v)

class AssessmentScore(BaseModel):
    teamwork: int = Field(ge=1, le=10)
    confidence: int = Field(ge=1, le=10)
    communication: int = Field(ge=1, le=10)

class Assessment(BaseModel):
    child_id: ChildId
    date: datetime
    type: AssessmentType
    score: AssessmentScore

    class Config:
        use_enum_values = True

    @field_validator("date")
    @classmethod
    def date_is_utc(cls, v):
        return as_utc(v)

class HomeVisit(BaseModel):
    id: str
    child_id: ChildId
    date: datetime
    notes: str

    @field_validator("date")
    @classmethod
    def date_is_utc(cls, v):
        return as_utc(v)

class Alert(BaseModel):
    id: int
    message: str
    type: AlertType = AlertType.DEFAULT

    class Config:
        use_enum_values = True
