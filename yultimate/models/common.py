from datetime import datetime, timezone
from typing import NewType, Optional

from pydantic import BaseModel, Field

UserId = NewType("UserId", str)
EventId = NewType("EventId", int)
ChildId = NewType("ChildId", str)
SessionId = NewType("SessionId", str)


class Coordinates(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive datetimes are read as UTC so every comparison is between aware values."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
