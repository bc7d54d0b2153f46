from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from yultimate.models.common import as_utc, utcnow
from yultimate.models.program_model import AssessmentType

class AssessmentCreate(BaseModel):
    child_id: str = Field(..., min_length=1, description="Please select a child.")
    type: AssessmentType
    teamwork: int = Field(..., ge=1, le=10)
    confidence: int = Field(..., ge=1, le=10)
    communication: int = Field(..., ge=1, le=10)
    date: datetime = Field(default_factory=utcnow)

    @field_validator("date")
    @classmethod
    def date_is_utc(cls, v):
        return as_utc(v)

class HomeVisitCreate(BaseModel):
    child_id: str = Field(..., min_length=1, description="Please select a child.")
    date: datetime
    notes: str = Field(..., min_length=10)

    @field_validator("date")
    @classmethod
    def date_is_utc(cls, v):
        return as_utc(v)

class AttendanceRequest(BaseModel):
    child_id: str = Field(..., min_length=1)

class CategoryProgress(BaseModel):
    category: str
    baseline: int = 0
    endline: int = 0

class AssessmentProgress(BaseModel):
    child_id: str
    has_baseline: bool
    has_endline: bool
    categories: List[CategoryProgress]

class ChildVisitSummary(BaseModel):
    child_id: str
    child_name: str
    visit_count: int
    last_visit: Optional[datetime] = None
