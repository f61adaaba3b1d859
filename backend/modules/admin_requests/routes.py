"""
Admin request API endpoints.

Any authenticated user may submit and list (their own) requests. Deciding
goes through the admin gate, and the lifecycle service re-checks the role.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import RequireAuth
from api.services import get_admin_request_service, get_admin_review_service
from shared.models import AuthenticatedUser

from .models import (
    AdminRequest,
    AdminRequestListResponse,
    CreateAdminRequest,
    DecideAdminRequest,
    DecisionResponse,
    ReviewAction,
)
from .service import AdminRequestService

router = APIRouter()

_PAST_TENSE = {ReviewAction.APPROVE: "approved", ReviewAction.DENY: "denied"}


@router.get("", response_model=AdminRequestListResponse)
async def list_admin_requests(
    user: AuthenticatedUser = RequireAuth,
    service: AdminRequestService = Depends(get_admin_request_service),
) -> AdminRequestListResponse:
    """
    List admin requests, newest first.

    Admins see every request; other users see only their own.
    """
    return AdminRequestListResponse(requests=await service.list_requests(user))


@router.post("", response_model=AdminRequest, status_code=201)
async def submit_admin_request(
    request: CreateAdminRequest,
    user: AuthenticatedUser = RequireAuth,
    service: AdminRequestService = Depends(get_admin_request_service),
) -> AdminRequest:
    """
    Ask to be promoted to admin.

    Fails with 409 if the caller already has a pending request.
    """
    return await service.submit(user, request.reason)


@router.patch("/{request_id}", response_model=DecisionResponse)
async def decide_admin_request(
    request_id: str,
    body: DecideAdminRequest,
    user: AuthenticatedUser = RequireAuth,
    service: AdminRequestService = Depends(get_admin_review_service),
) -> DecisionResponse:
    """
    Approve or deny a pending request. Admin only.

    Non-admins are rejected with 403 before any service is built.
    """
    decided = await service.decide(request_id, body.action, user)
    return DecisionResponse(
        message=f"Request {_PAST_TENSE[body.action]} successfully",
        request=decided,
    )
