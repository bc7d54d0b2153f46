from pydantic import BaseModel, Field

class Team(BaseModel):
    id: str
    name: str
    wins: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)
    spirit_score: float = Field(default=0, ge=0)

class PlayerStat(BaseModel):
    id: str
    name: str
    team: str
    score: int = Field(default=0, ge=0)
    assists: int = Field(default=0, ge=0)
