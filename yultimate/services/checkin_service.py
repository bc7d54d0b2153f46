"""QR check-in for events and coaching sessions.

An event QR code carries either ``{"eventId": <int>, "userName": <str>}`` or
just the event id as a decimal string. Anything else is an invalid code.
"""
import json
import logging
import time
from typing import Callable, Dict, Iterable, Optional, Tuple

from yultimate.core.config import settings
from yultimate.models import EventModel
from yultimate.schemas.checkin_schemas import CheckinResult, SessionAttendance, SessionCheckinResult
from yultimate.services.program_service import ProgramService

logger = logging.getLogger(__name__)

INVALID_CODE_MESSAGE = "Invalid QR code. No matching event found."

def parse_checkin_payload(payload: str) -> Optional[Tuple[int, Optional[str]]]:
    """Returns ``(event_id, user_name)`` or ``None`` when the text is not a valid code."""
    text = (payload or "").strip()
    if not text:
        return None

    try:
        data = json.loads(text)
    except ValueError:
        data = None

    if isinstance(data, dict):
        event_id = data.get("eventId")
        # bool is an int subclass but never a valid id
        if isinstance(event_id, bool) or not isinstance(event_id, int):
            return None
        user_name = data.get("userName")
        if user_name is not None and not isinstance(user_name, str):
            user_name = None
        return event_id, user_name

    # Not a JSON object: the whole text must be a decimal event id
    if text.isdecimal():
        return int(text), None
    return None

def match_checkin(payload: str, events: Iterable[EventModel]) -> CheckinResult:
    parsed = parse_checkin_payload(payload)
    if parsed is None:
        return CheckinResult(success=False, message=INVALID_CODE_MESSAGE)

    event_id, user_name = parsed
    event = next((e for e in events if e.id == event_id), None)
    if not event:
        return CheckinResult(success=False, message=INVALID_CODE_MESSAGE)

    if user_name:
        message = f"{user_name} checked in to {event.name}."
    else:
        message = f"Checked in to {event.name}."
    return CheckinResult(
        success=True,
        event_id=event.id,
        event_name=event.name,
        participant_name=user_name,
        message=message,
    )

class CheckinScanner:
    """A scanning station.

    Every attempt, successful or not, disarms the scanner for ``reset_seconds``.
    Scans arriving while it is disarmed are rejected without a lookup. The
    re-arm is checked against the clock on the next scan, so nothing is
    scheduled in the background.
    """

    BUSY_MESSAGE = "Scanner is resetting. Please wait before scanning again."

    def __init__(self, reset_seconds: Optional[float] = None, clock: Callable[[], float] = time.monotonic):
        self.reset_seconds = settings.CHECKIN_RESET_SECONDS if reset_seconds is None else reset_seconds
        self.clock = clock
        self._rearm_at: Optional[float] = None

    @property
    def is_scanning(self) -> bool:
        if self._rearm_at is not None and self.clock() >= self._rearm_at:
            self._rearm_at = None
        return self._rearm_at is None

    def scan(self, payload: str, events: Iterable[EventModel]) -> CheckinResult:
        if not self.is_scanning:
            return CheckinResult(success=False, message=self.BUSY_MESSAGE)

        result = match_checkin(payload, events)
        self._rearm_at = self.clock() + self.reset_seconds
        if result.success:
            logger.info("Check-in for event %s (%s)", result.event_id, result.participant_name or "anonymous")
        else:
            logger.warning("Rejected check-in payload %r", payload)
        return result

class CheckinStations:
    """Scanners keyed by station, so one station's cool-down never blocks another.

    A scanner that has re-armed holds no state worth keeping and is dropped
    when the next new station registers.
    """

    def __init__(self, reset_seconds: Optional[float] = None, clock: Callable[[], float] = time.monotonic):
        self.reset_seconds = reset_seconds
        self.clock = clock
        self._scanners: Dict[str, CheckinScanner] = {}

    def __len__(self) -> int:
        return len(self._scanners)

    def for_station(self, station_id: str) -> CheckinScanner:
        scanner = self._scanners.get(station_id)
        if scanner is None:
            self._scanners = {k: s for k, s in self._scanners.items() if not s.is_scanning}
            scanner = CheckinScanner(self.reset_seconds, self.clock)
            self._scanners[station_id] = scanner
        return scanner

class SessionCheckinService:
    """Marks children present in coaching sessions from their QR codes."""

    def __init__(self, program_service: ProgramService):
        self.program_service = program_service

    def check_in_child(self, session_id: str, child_id: str) -> SessionCheckinResult:
        child = self.program_service.get_child(child_id)
        session = self.program_service.get_session(session_id)
        if not child or not session:
            return SessionCheckinResult(
                success=False,
                session_id=session_id,
                child_id=child_id,
                message="Could not find the child or session from the scanned QR code.",
            )

        self.program_service.mark_session_attendance(session_id, child_id)
        return SessionCheckinResult(
            success=True,
            session_id=session_id,
            child_id=child_id,
            child_name=child.name,
            message=f"{child.name} marked present for session in {session.community}.",
        )

    def attendance(self, session_id: str) -> Optional[SessionAttendance]:
        session = self.program_service.get_session(session_id)
        if not session:
            return None

        names = []
        for child_id in session.participants:
            child = self.program_service.get_child(child_id)
            if child:
                names.append(child.name)
        return SessionAttendance(
            session_id=session.id,
            community=session.community,
            present=len(session.participants),
            community_size=self.program_service.state.community_size(session.community),
            children=names,
        )
