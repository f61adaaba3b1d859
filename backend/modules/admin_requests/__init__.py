"""
Admin requests module.

Lifecycle of a student's request for admin access and its review.
"""

from .interfaces import IAdminRequestRepository
from .models import (
    AdminRequest,
    AdminRequestStatus,
    ReviewAction,
    CreateAdminRequest,
    DecideAdminRequest,
)
from .exceptions import (
    ReasonRequiredError,
    DuplicateAdminRequestError,
    AdminRequestNotFoundError,
    AlreadyProcessedError,
    RoleUpdateFailedError,
)

__all__ = [
    "IAdminRequestRepository",
    "AdminRequest",
    "AdminRequestStatus",
    "ReviewAction",
    "CreateAdminRequest",
    "DecideAdminRequest",
    "ReasonRequiredError",
    "DuplicateAdminRequestError",
    "AdminRequestNotFoundError",
    "AlreadyProcessedError",
    "RoleUpdateFailedError",
]
