from uuid import uuid4

from fastapi import Depends, HTTPException, Request

from yultimate.core.config import settings
from yultimate.services.auth_service import AuthService
from yultimate.services.checkin_service import CheckinScanner, SessionCheckinService
from yultimate.services.coaching_service import CoachingService
from yultimate.services.event_service import EventService
from yultimate.services.gallery_service import GalleryService
from yultimate.services.map_service import MapService
from yultimate.services.program_service import ProgramService
from yultimate.services.report_service import ReportService
from yultimate.services.state import AppState
from yultimate.services.user_service import UserService

def get_state(request: Request) -> AppState:
    return request.app.state.store

def get_event_service(state: AppState = Depends(get_state)) -> EventService:
    return EventService(state)

def get_coaching_service(state: AppState = Depends(get_state)) -> CoachingService:
    return CoachingService(state)

def get_user_service(state: AppState = Depends(get_state)) -> UserService:
    return UserService(state)

def get_program_service(state: AppState = Depends(get_state)) -> ProgramService:
    return ProgramService(state)

def get_gallery_service(state: AppState = Depends(get_state)) -> GalleryService:
    return GalleryService(state)

def get_report_service(state: AppState = Depends(get_state)) -> ReportService:
    return ReportService(state)

def get_map_service(state: AppState = Depends(get_state)) -> MapService:
    return MapService(state)

def get_session_checkin_service(program_service: ProgramService = Depends(get_program_service)) -> SessionCheckinService:
    return SessionCheckinService(program_service)

def get_scanner(request: Request) -> CheckinScanner:
    """
    Returns the scanner of the calling client's station.
    A client without a station gets a new one, remembered in its session.
    """
    station_id = request.session.get(settings.CHECKIN_STATION_KEY)
    if not station_id:
        station_id = uuid4().hex
        request.session[settings.CHECKIN_STATION_KEY] = station_id
    return request.app.state.checkin_stations.for_station(station_id)

def get_auth_service(request: Request, user_service: UserService = Depends(get_user_service)) -> AuthService:
    # request.session is the client-side store, signed into the session cookie
    return AuthService(request.session, user_service)

async def get_current_user(auth_service: AuthService = Depends(get_auth_service)):
    """
    Rehydrates the current user from the session.
    Raises HTTPException if nobody is logged in.
    """
    user = auth_service.current_user()
    if not user:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user

async def get_optional_user(auth_service: AuthService = Depends(get_auth_service)):
    return auth_service.current_user()
