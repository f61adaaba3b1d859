"""
Admin user-management endpoints.
"""

from fastapi import APIRouter, Depends

from api.services import get_profile_admin_service

from .models import Profile, UpdateRoleRequest
from .service import ProfileService

router = APIRouter()


@router.patch("/{user_id}/role", response_model=Profile)
async def update_user_role(
    user_id: str,
    request: UpdateRoleRequest,
    service: ProfileService = Depends(get_profile_admin_service),
) -> Profile:
    """
    Set a user's role directly. Admin only.
    """
    return await service.set_role(user_id, request.role)
