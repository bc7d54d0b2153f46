from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path

from yultimate.api.dependencies import get_coaching_service, get_current_user
from yultimate.models import CoachingCenter
from yultimate.schemas.coaching_schemas import CoachingCenterCreate, CoachingCenterDetail
from yultimate.services.coaching_service import CoachingService

router = APIRouter()

@router.get("", response_model=List[CoachingCenter], summary="List coaching centers")
async def list_centers(service: CoachingService = Depends(get_coaching_service)):
    return service.list_centers()

@router.post("", response_model=CoachingCenter, status_code=201, summary="Create coaching center")
async def create_center(
    center_data: CoachingCenterCreate,
    service: CoachingService = Depends(get_coaching_service)
):
    return service.add_coaching_center(center_data)

@router.get("/{center_id}", response_model=CoachingCenterDetail, summary="Coaching center with enrolled users")
async def get_center(
    center_id: int = Path(..., description="The ID of the coaching center"),
    service: CoachingService = Depends(get_coaching_service)
):
    detail = service.get_center_detail(center_id)
    if not detail:
        raise HTTPException(status_code=404, detail="Coaching center not found")
    return detail

@router.post("/{center_id}/enrollment", response_model=CoachingCenter, summary="Enroll or leave")
async def toggle_enrollment(
    center_id: int = Path(..., description="The ID of the coaching center"),
    current_user=Depends(get_current_user),
    service: CoachingService = Depends(get_coaching_service)
):
    center = service.toggle_coaching_center_registration(center_id, current_user.id)
    if not center:
        raise HTTPException(status_code=404, detail="Coaching center not found")
    return center
