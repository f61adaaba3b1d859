"""
Admin request models.

An admin request records a student's application to become an admin and
the outcome of its review.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class AdminRequestStatus(str, Enum):
    """Admin request status. Leaves pending exactly once."""

    PENDING = "pending"
    APPROVED = "approved"
    DENIED = "denied"


class ReviewAction(str, Enum):
    """Decision an admin can take on a pending request."""

    APPROVE = "approve"
    DENY = "deny"

    @property
    def resulting_status(self) -> AdminRequestStatus:
        if self is ReviewAction.APPROVE:
            return AdminRequestStatus.APPROVED
        return AdminRequestStatus.DENIED


class ProfileSummary(BaseModel):
    """Profile fields embedded in request listings."""

    full_name: Optional[str] = None
    email: Optional[str] = None


class AdminRequest(BaseModel):
    """A row of the admin_requests table."""

    id: str
    user_id: str
    reason: str
    status: AdminRequestStatus = AdminRequestStatus.PENDING
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    requester: Optional[ProfileSummary] = None
    # None when unreviewed or the reviewer has no profile row (seeded admin)
    reviewer: Optional[ProfileSummary] = None


class CreateAdminRequest(BaseModel):
    """Request body for submitting an admin request."""

    reason: str = Field(..., max_length=2000, description="Why the user wants admin access")


class DecideAdminRequest(BaseModel):
    """Request body for approving or denying a request."""

    action: ReviewAction


class AdminRequestListResponse(BaseModel):
    """Admin requests visible to the caller, newest first."""

    requests: list[AdminRequest]


class DecisionResponse(BaseModel):
    """Outcome of a review."""

    success: bool = True
    message: str
    request: AdminRequest
