from typing import List, Optional

from pydantic import BaseModel

from yultimate.models import Coordinates, PlayerStat, Team
from yultimate.schemas.dashboard_schemas import CommunityStats, GenderSlice

class MonthlyActivity(BaseModel):
    month: str
    hours: int

class ProgramReport(BaseModel):
    communities: List[CommunityStats]
    gender: List[GenderSlice]
    coach_activity: List[MonthlyActivity]

class Leaderboard(BaseModel):
    top_players: List[PlayerStat]
    top_teams: List[Team]
    top_spirit: List[Team]

class PointOfInterest(BaseModel):
    id: str
    name: str
    type: str # "venue", "center" or "community"
    coordinates: Coordinates
    description: str
    children: Optional[int] = None
    sessions: Optional[int] = None
