"""
User-related endpoints.

The caller's own role and profile. Both run as the caller under
Row Level Security.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from shared.models import AuthenticatedUser
from modules.roles.models import EnsureProfileRequest, Profile
from modules.roles.service import CurrentUserRole, ProfileService

from ..middleware.auth import RequireAuth
from ..services import get_self_profile_service

router = APIRouter()


@router.get("/me", response_model=CurrentUserRole)
async def get_current_user_role(
    user: AuthenticatedUser = RequireAuth,
    service: ProfileService = Depends(get_self_profile_service),
) -> CurrentUserRole:
    """
    Get the current user's resolved role.

    Falls back to the student role if no profile exists.
    """
    return await service.get_current_user_role(user)


@router.post("/me/profile", response_model=Profile)
async def ensure_current_user_profile(
    request: Optional[EnsureProfileRequest] = None,
    user: AuthenticatedUser = RequireAuth,
    service: ProfileService = Depends(get_self_profile_service),
) -> Profile:
    """
    Create the caller's profile if it does not exist yet.

    Called by the frontend after sign-up and sign-in. Idempotent.
    """
    full_name = request.full_name if request else None
    return await service.ensure_profile(user, full_name)
