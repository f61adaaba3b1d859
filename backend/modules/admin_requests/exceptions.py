"""
Admin request module exceptions.
"""

from shared.exceptions import (
    ConflictError,
    NotFoundError,
    StoreError,
    ValidationError,
)


class ReasonRequiredError(ValidationError):
    """Raised when a request is submitted without a reason."""

    def __init__(self):
        super().__init__("Reason is required", code="REASON_REQUIRED")


class DuplicateAdminRequestError(ConflictError):
    """Raised when the user already has a pending request."""

    def __init__(self, user_id: str):
        super().__init__(
            "You already have a pending admin request",
            code="DUPLICATE_REQUEST",
            details={"user_id": user_id},
        )


class AdminRequestNotFoundError(NotFoundError):
    """Raised when an admin request does not exist."""

    def __init__(self, request_id: str):
        super().__init__(
            f"Admin request not found: {request_id}",
            code="REQUEST_NOT_FOUND",
            details={"request_id": request_id},
        )


class AlreadyProcessedError(ConflictError):
    """Raised when deciding a request that is no longer pending."""

    def __init__(self, request_id: str, status: str):
        super().__init__(
            "Request has already been processed",
            code="ALREADY_PROCESSED",
            details={"request_id": request_id, "status": status},
        )


class RoleUpdateFailedError(StoreError):
    """
    Raised when the requester's role could not be changed after a decision.

    The decision itself has been rolled back to pending by the time this
    is raised.
    """

    def __init__(self, request_id: str, user_id: str, reason: str):
        super().__init__(
            f"Failed to update user role: {reason}",
            operation="update requester role",
            details={"request_id": request_id, "user_id": user_id},
        )
        self.code = "ROLE_UPDATE_FAILED"
