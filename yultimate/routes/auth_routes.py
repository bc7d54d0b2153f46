from fastapi import APIRouter, Depends, HTTPException

from yultimate.api.dependencies import get_auth_service, get_current_user
from yultimate.models import User
from yultimate.schemas.auth_schemas import RoleLoginRequest
from yultimate.services.auth_service import AuthService

router = APIRouter()

@router.post("/login", response_model=User, summary="Log in as the first user with a role")
async def login(
    login_data: RoleLoginRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    There are no credentials in the demo: the chosen role picks the first
    seeded user of that role and stores it in the session.
    """
    user = auth_service.login(login_data.role)
    if not user:
        raise HTTPException(status_code=404, detail=f"No user with role {login_data.role}")
    return user

@router.post("/logout", status_code=204, summary="Clear the current user")
async def logout(auth_service: AuthService = Depends(get_auth_service)):
    auth_service.logout()

@router.get("/me", response_model=User, summary="Get current user")
async def read_current_user(current_user=Depends(get_current_user)):
    return current_user
