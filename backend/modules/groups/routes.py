"""
Group chat endpoints.

Message endpoints are member-only; membership is checked by the
authorization gate before the service is built.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import RequireAuth, require_group_member
from api.services import get_group_service, get_member_group_service
from modules.access.models import AccessGrant
from shared.models import AuthenticatedUser

from .models import GroupMessage, JoinGroupResponse, MessageListResponse, PostMessageRequest
from .service import GroupService

router = APIRouter()


@router.post("/{group_id}/join", response_model=JoinGroupResponse)
async def join_group(
    group_id: str,
    user: AuthenticatedUser = RequireAuth,
    service: GroupService = Depends(get_group_service),
) -> JoinGroupResponse:
    """Join a group. Joining twice is not an error."""
    return await service.join(group_id, user.id)


@router.get("/{group_id}/messages", response_model=MessageListResponse)
async def list_group_messages(
    group_id: str,
    service: GroupService = Depends(get_member_group_service),
) -> MessageListResponse:
    """Messages of a group, oldest first. Members only."""
    return MessageListResponse(messages=await service.list_messages(group_id))


@router.post("/{group_id}/messages", response_model=GroupMessage, status_code=201)
async def post_group_message(
    group_id: str,
    request: PostMessageRequest,
    grant: AccessGrant = Depends(require_group_member),
    service: GroupService = Depends(get_member_group_service),
) -> GroupMessage:
    """Post a message into a group. Members only."""
    return await service.post_message(group_id, grant.user.id, request.message)
