from fastapi import APIRouter, Depends

from yultimate.api.dependencies import get_current_user, get_state
from yultimate.schemas.dashboard_schemas import Dashboard
from yultimate.services.dashboard_service import build_dashboard
from yultimate.services.state import AppState

router = APIRouter()

@router.get("", response_model=Dashboard, summary="Dashboard for the current user's role")
async def read_dashboard(
    current_user=Depends(get_current_user),
    state: AppState = Depends(get_state)
):
    return build_dashboard(state, current_user)
