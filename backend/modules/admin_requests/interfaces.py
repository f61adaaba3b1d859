"""
Admin request module interfaces.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import AdminRequest, AdminRequestStatus


@runtime_checkable
class IAdminRequestRepository(Protocol):
    """Data access for the admin_requests table. All methods raise StoreError."""

    def get_by_id(self, request_id: str) -> Optional[AdminRequest]:
        ...

    def get_pending_for_user(self, user_id: str) -> Optional[AdminRequest]:
        ...

    def create(self, user_id: str, reason: str) -> AdminRequest:
        ...

    def list_requests(self, user_id: Optional[str] = None) -> list[AdminRequest]:
        """All requests, or only user_id's when given. Newest first."""
        ...

    def mark_reviewed(
        self,
        request_id: str,
        status: AdminRequestStatus,
        reviewer_id: str,
    ) -> Optional[AdminRequest]:
        """
        Move a pending request to status. Conditional on status = pending;
        returns None when no pending row matched.
        """
        ...

    def revert_to_pending(
        self,
        request_id: str,
        from_status: AdminRequestStatus,
    ) -> Optional[AdminRequest]:
        """Undo mark_reviewed, clearing reviewer fields. Conditional on from_status."""
        ...
