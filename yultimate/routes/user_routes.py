from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path

from yultimate.api.dependencies import get_auth_service, get_current_user, get_user_service
from yultimate.models import CoachUser, Organization, OrganizerUser, ParticipantUser, User
from yultimate.schemas.user_schemas import (
    CoachRegistration,
    OrganizationCreate,
    OrganizerRegistration,
    ParticipantRegistration,
)
from yultimate.services.auth_service import AuthService
from yultimate.services.user_service import UserService

router = APIRouter()

# --- Users ---

@router.get("/users", response_model=List[User], summary="List users")
async def list_users(service: UserService = Depends(get_user_service)):
    return service.list_users()

@router.get("/users/{user_id}", response_model=User, summary="Get user by ID")
async def get_user(
    user_id: str = Path(..., description="The ID of the user"),
    service: UserService = Depends(get_user_service)
):
    user = service.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user

# --- Registration ---
# A successful registration logs the new user in straight away.

@router.post("/register/participant", response_model=ParticipantUser, status_code=201)
async def register_participant(
    registration: ParticipantRegistration,
    service: UserService = Depends(get_user_service),
    auth_service: AuthService = Depends(get_auth_service)
):
    try:
        user = service.add_participant(registration)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return auth_service.login_from_registration(user)

@router.post("/register/organizer", response_model=OrganizerUser, status_code=201)
async def register_organizer(
    registration: OrganizerRegistration,
    service: UserService = Depends(get_user_service),
    auth_service: AuthService = Depends(get_auth_service)
):
    """Creates the organizer together with their organization."""
    try:
        user = service.add_organizer(registration)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return auth_service.login_from_registration(user)

@router.post("/register/coach", response_model=CoachUser, status_code=201)
async def register_coach(
    registration: CoachRegistration,
    service: UserService = Depends(get_user_service),
    auth_service: AuthService = Depends(get_auth_service)
):
    try:
        user = service.add_coach(registration)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return auth_service.login_from_registration(user)

# --- Organizations ---

@router.get("/organizations", response_model=List[Organization], summary="List organizations")
async def list_organizations(service: UserService = Depends(get_user_service)):
    return service.list_organizations()

@router.get("/organizations/mine", response_model=List[Organization], summary="Organizations of the current user")
async def my_organizations(
    current_user=Depends(get_current_user),
    service: UserService = Depends(get_user_service)
):
    return service.organizations_for_user(current_user.id)

@router.post("/organizations", response_model=Organization, status_code=201, summary="Create organization")
async def create_organization(
    organization_data: OrganizationCreate,
    current_user=Depends(get_current_user),
    service: UserService = Depends(get_user_service)
):
    """The current user becomes the organization's first organizer."""
    return service.add_organization(organization_data, organizers=[current_user.id])
