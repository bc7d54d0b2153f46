from typing import List, Optional

from pydantic import BaseModel, Field

from yultimate.models.common import Coordinates, UserId

class CoachingCenter(BaseModel):
    id: int
    name: str
    specialty: str
    location: str
    coordinates: Optional[Coordinates] = None
    participants: List[UserId] = Field(default_factory=list)
    description: str = ""
    fee: float = Field(default=0, ge=0)
    schedule: str = ""

    class Config:
        from_attributes = True
