"""Profile endpoint for the authenticated user."""
from fastapi import APIRouter, Depends

from app.routes.auth import get_current_user
from core.database.entities import User
from core.models.user import UserPublic
from core.services.auth.auth_service import auth_service

router = APIRouter()


@router.get("", response_model=UserPublic)
async def get_profile(current_user: User = Depends(get_current_user)):
    """Return the authenticated user's record, without the password hash."""
    return auth_service.get_public_user(current_user)
