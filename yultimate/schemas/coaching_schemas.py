from typing import List, Optional

from pydantic import BaseModel, Field

from yultimate.models.common import Coordinates

class CoachingCenterCreate(BaseModel):
    name: str = Field(..., min_length=3)
    specialty: str = Field(..., min_length=3)
    location: str = Field(..., min_length=3)
    description: str = Field(..., min_length=10)
    fee: float = Field(..., ge=0, description="Fee must be a positive number.")
    schedule: str = Field(..., min_length=3)
    coordinates: Optional[Coordinates] = None

class EnrolledUser(BaseModel):
    id: str
    name: str
    email: str

class CoachingCenterDetail(BaseModel):
    id: int
    name: str
    specialty: str
    location: str
    description: str
    schedule: str
    fee: float
    fee_display: str
    participants: List[EnrolledUser]
