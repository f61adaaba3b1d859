"""
Groups module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError, AuthorizationError


class GroupNotFoundError(NotFoundError):
    """Raised when a group does not exist."""

    def __init__(self, group_id: str):
        super().__init__(
            f"Group not found: {group_id}",
            code="GROUP_NOT_FOUND",
            details={"group_id": group_id},
        )


class NotGroupMemberError(AuthorizationError):
    """Raised when the caller has no membership row for the group."""

    def __init__(self, group_id: str, user_id: str):
        super().__init__(
            f"Access denied to group: {group_id}",
            code="NOT_GROUP_MEMBER",
            details={"group_id": group_id, "user_id": user_id},
        )


class EmptyMessageError(ValidationError):
    """Raised when a message is blank after trimming."""

    def __init__(self):
        super().__init__("Message content is required", code="MESSAGE_REQUIRED")
