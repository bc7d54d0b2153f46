from fastapi import APIRouter, Depends, HTTPException, Path

from yultimate.api.dependencies import get_event_service, get_scanner, get_session_checkin_service
from yultimate.schemas.checkin_schemas import CheckinResult, ScanRequest, SessionAttendance, SessionCheckinResult
from yultimate.schemas.program_schemas import AttendanceRequest
from yultimate.services.checkin_service import CheckinScanner, SessionCheckinService
from yultimate.services.event_service import EventService

router = APIRouter()

@router.post("/scan", response_model=CheckinResult, summary="Check in from a scanned event QR code")
async def scan_event_code(
    scan: ScanRequest,
    scanner: CheckinScanner = Depends(get_scanner),
    event_service: EventService = Depends(get_event_service)
):
    """
    Matches the scanned text against the event list.
    The scanner rests for a few seconds after every attempt; scans during that
    window come back with ``success: false`` and a busy message.
    """
    return scanner.scan(scan.payload, event_service.list_events())

@router.post("/sessions/{session_id}", response_model=SessionCheckinResult, summary="Mark a child present")
async def check_in_child(
    attendance: AttendanceRequest,
    session_id: str = Path(..., description="The ID of the coaching session"),
    service: SessionCheckinService = Depends(get_session_checkin_service)
):
    return service.check_in_child(session_id, attendance.child_id)

@router.get("/sessions/{session_id}", response_model=SessionAttendance, summary="Attendance for a session")
async def session_attendance(
    session_id: str = Path(..., description="The ID of the coaching session"),
    service: SessionCheckinService = Depends(get_session_checkin_service)
):
    summary = service.attendance(session_id)
    if not summary:
        raise HTTPException(status_code=404, detail="Session not found")
    return summary
