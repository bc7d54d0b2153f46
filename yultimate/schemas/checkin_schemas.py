from typing import List, Optional

from pydantic import BaseModel, Field

class ScanRequest(BaseModel):
    payload: str = ""

class CheckinResult(BaseModel):
    success: bool
    event_id: Optional[int] = None
    event_name: Optional[str] = None
    participant_name: Optional[str] = None
    message: str

class SessionCheckinResult(BaseModel):
    success: bool
    session_id: str
    child_id: str
    child_name: Optional[str] = None
    message: str

class SessionAttendance(BaseModel):
    session_id: str
    community: str
    present: int
    community_size: int
    children: List[str] = Field(default_factory=list) # Names of the children marked present
