"""
Admin request lifecycle.

submit:  student files a request -> request pending, role student -> pending_admin
decide:  admin approves -> request approved, requester role -> admin
         admin denies   -> request denied,   requester role -> student

The request row and the profile row live in different tables and are not
written in one transaction. When the role write fails after the status
write succeeded, the status write is undone (back to pending, reviewer
fields cleared) and the failure is raised to the caller.
"""

import logging
from typing import Optional

from shared.exceptions import StoreError
from shared.models import AuthenticatedUser
from shared.repository import is_unique_violation
from modules.roles.exceptions import ForbiddenError
from modules.roles.interfaces import IProfileRepository, IRoleResolver
from modules.roles.models import Role

from .exceptions import (
    AdminRequestNotFoundError,
    AlreadyProcessedError,
    DuplicateAdminRequestError,
    ReasonRequiredError,
    RoleUpdateFailedError,
)
from .interfaces import IAdminRequestRepository
from .models import AdminRequest, AdminRequestStatus, ReviewAction

logger = logging.getLogger(__name__)


class AdminRequestService:
    """
    Admin request lifecycle operations.

    Args:
        requests: admin_requests data access.
        profiles: profiles data access, for the mirrored role writes.
        resolver: used to re-derive the reviewer's role on every decision.
    """

    def __init__(
        self,
        requests: IAdminRequestRepository,
        profiles: IProfileRepository,
        resolver: IRoleResolver,
    ):
        self._requests = requests
        self._profiles = profiles
        self._resolver = resolver

    async def submit(self, user: AuthenticatedUser, reason: Optional[str]) -> AdminRequest:
        """
        File a new pending request for user.

        Raises:
            ReasonRequiredError: If reason is blank.
            DuplicateAdminRequestError: If user already has a pending request.
            StoreError: If the insert fails.
        """
        text = (reason or "").strip()
        if not text:
            raise ReasonRequiredError()

        if self._requests.get_pending_for_user(user.id) is not None:
            raise DuplicateAdminRequestError(user.id)

        try:
            request = self._requests.create(user.id, text)
        except StoreError as e:
            if is_unique_violation(e):
                raise DuplicateAdminRequestError(user.id) from e
            raise

        # Best effort; an admin or pending_admin keeps its role
        try:
            self._profiles.update_role(user.id, Role.PENDING_ADMIN, expected_role=Role.STUDENT)
        except StoreError as e:
            logger.warning(f"Could not mark {user.id} as pending_admin: {e}")

        logger.info(f"Admin request {request.id} submitted by {user.id}")
        return request

    async def decide(
        self,
        request_id: str,
        action: ReviewAction,
        reviewer: AuthenticatedUser,
    ) -> AdminRequest:
        """
        Approve or deny a pending request.

        Raises:
            ForbiddenError: If the reviewer does not resolve to admin.
            AdminRequestNotFoundError: If the request does not exist.
            AlreadyProcessedError: If the request is no longer pending,
                including when a concurrent decision won the race.
            RoleUpdateFailedError: If the requester's role could not be set;
                the request is back to pending.
            StoreError: If the status write fails.
        """
        reviewer_role = await self._resolver.resolve_role(reviewer)
        if reviewer_role != Role.ADMIN:
            raise ForbiddenError(Role.ADMIN.value, reviewer_role.value)

        existing = self._requests.get_by_id(request_id)
        if existing is None:
            raise AdminRequestNotFoundError(request_id)
        if existing.status != AdminRequestStatus.PENDING:
            raise AlreadyProcessedError(request_id, existing.status.value)

        new_status = action.resulting_status
        updated = self._requests.mark_reviewed(request_id, new_status, reviewer.id)
        if updated is None:
            current = self._requests.get_by_id(request_id)
            if current is None:
                raise AdminRequestNotFoundError(request_id)
            raise AlreadyProcessedError(request_id, current.status.value)

        new_role = Role.ADMIN if action is ReviewAction.APPROVE else Role.STUDENT
        try:
            profile = self._profiles.update_role(existing.user_id, new_role)
        except StoreError as e:
            self._rollback(request_id, new_status)
            raise RoleUpdateFailedError(request_id, existing.user_id, e.message) from e

        # Approving a user with no profile row would leave the grant unapplied.
        # Denying one is a no-op: a missing profile already resolves to student.
        if profile is None and action is ReviewAction.APPROVE:
            self._rollback(request_id, new_status)
            raise RoleUpdateFailedError(request_id, existing.user_id, "profile not found")

        logger.info(
            f"Admin request {request_id} {new_status.value} by {reviewer.id}; "
            f"{existing.user_id} is now {new_role.value}"
        )
        return updated

    async def list_requests(self, viewer: AuthenticatedUser) -> list[AdminRequest]:
        """Admins see every request, everyone else sees their own."""
        role = await self._resolver.resolve_role(viewer)
        if role == Role.ADMIN:
            return self._requests.list_requests()
        return self._requests.list_requests(user_id=viewer.id)

    def _rollback(self, request_id: str, from_status: AdminRequestStatus) -> None:
        """Return a reviewed request to pending after a failed role write."""
        try:
            reverted = self._requests.revert_to_pending(request_id, from_status)
        except StoreError as e:
            logger.error(f"Rollback of admin request {request_id} failed: {e}")
            return
        if reverted is None:
            logger.error(f"Rollback of admin request {request_id} matched no row")
        else:
            logger.error(f"Admin request {request_id} reverted to pending after role update failure")
