"""
Roles module exceptions.
"""

from shared.exceptions import NotFoundError, AuthorizationError


class ProfileNotFoundError(NotFoundError):
    """Raised when a profile row does not exist."""

    def __init__(self, user_id: str):
        super().__init__(
            f"Profile not found: {user_id}",
            code="PROFILE_NOT_FOUND",
            details={"user_id": user_id},
        )


class ForbiddenError(AuthorizationError):
    """Raised when an identity's role is not sufficient for an operation."""

    def __init__(self, required_role: str, user_role: str):
        super().__init__(
            f"Insufficient permissions. Required: {required_role}, has: {user_role}",
            code="FORBIDDEN",
            details={"required_role": required_role, "user_role": user_role},
        )
