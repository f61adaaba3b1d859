"""
Admin request repository for database access.

Encapsulates all Supabase queries against the admin_requests table.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from shared.repository import BaseRepository
from .models import AdminRequest, AdminRequestStatus, ProfileSummary

TABLE = "admin_requests"

LIST_SELECT = "*, requester:profiles!admin_requests_user_id_fkey(full_name, email)"

REVIEWER_SELECT = "id, full_name, email"


class AdminRequestRepository(BaseRepository[AdminRequest]):
    """
    Repository for admin request data access.

    Status changes are conditional updates so that two concurrent reviews of
    the same request cannot both succeed: the loser matches zero rows.

    Note: This repository does NOT perform authorization checks.
    """

    def get_by_id(self, request_id: str) -> Optional[AdminRequest]:
        result = self._execute(
            "get admin request",
            lambda: self._db.table(TABLE).select("*").eq("id", request_id).execute(),
        )
        if not result.data:
            return None
        return self._map_to_request(result.data[0])

    def get_pending_for_user(self, user_id: str) -> Optional[AdminRequest]:
        result = self._execute(
            "check pending admin requests",
            lambda: self._db.table(TABLE)
            .select("*")
            .eq("user_id", user_id)
            .eq("status", AdminRequestStatus.PENDING.value)
            .limit(1)
            .execute(),
        )
        if not result.data:
            return None
        return self._map_to_request(result.data[0])

    def create(self, user_id: str, reason: str) -> AdminRequest:
        data = {
            "user_id": user_id,
            "reason": reason,
            "status": AdminRequestStatus.PENDING.value,
        }
        result = self._execute(
            "create admin request",
            lambda: self._db.table(TABLE).insert(data).execute(),
        )
        return self._map_to_request(result.data[0])

    def list_requests(self, user_id: Optional[str] = None) -> list[AdminRequest]:
        def query():
            q = self._db.table(TABLE).select(LIST_SELECT)
            if user_id is not None:
                q = q.eq("user_id", user_id)
            return q.order("created_at", desc=True).execute()

        result = self._execute("list admin requests", query)
        requests = [self._map_to_request(row) for row in result.data]
        self._attach_reviewers(requests)
        return requests

    def _attach_reviewers(self, requests: list[AdminRequest]) -> None:
        # reviewed_by references auth.users, so PostgREST cannot embed it
        reviewer_ids = sorted({r.reviewed_by for r in requests if r.reviewed_by})
        if not reviewer_ids:
            return

        result = self._execute(
            "load reviewer profiles",
            lambda: self._db.table("profiles")
            .select(REVIEWER_SELECT)
            .in_("id", reviewer_ids)
            .execute(),
        )
        summaries = {
            str(row["id"]): ProfileSummary(full_name=row.get("full_name"), email=row.get("email"))
            for row in result.data
        }
        for request in requests:
            if request.reviewed_by:
                request.reviewer = summaries.get(request.reviewed_by)

    def mark_reviewed(
        self,
        request_id: str,
        status: AdminRequestStatus,
        reviewer_id: str,
    ) -> Optional[AdminRequest]:
        data = {
            "status": status.value,
            "reviewed_by": reviewer_id,
            "reviewed_at": datetime.now(timezone.utc).isoformat(),
        }
        result = self._execute(
            "update admin request",
            lambda: self._db.table(TABLE)
            .update(data)
            .eq("id", request_id)
            .eq("status", AdminRequestStatus.PENDING.value)
            .execute(),
        )
        if not result.data:
            return None
        return self._map_to_request(result.data[0])

    def revert_to_pending(
        self,
        request_id: str,
        from_status: AdminRequestStatus,
    ) -> Optional[AdminRequest]:
        data = {
            "status": AdminRequestStatus.PENDING.value,
            "reviewed_by": None,
            "reviewed_at": None,
        }
        result = self._execute(
            "revert admin request",
            lambda: self._db.table(TABLE)
            .update(data)
            .eq("id", request_id)
            .eq("status", from_status.value)
            .execute(),
        )
        if not result.data:
            return None
        return self._map_to_request(result.data[0])

    def _map_to_request(self, data: dict[str, Any]) -> AdminRequest:
        requester = data.get("requester")
        return AdminRequest(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            reason=data["reason"],
            status=AdminRequestStatus(data["status"]),
            reviewed_by=str(data["reviewed_by"]) if data.get("reviewed_by") else None,
            reviewed_at=data.get("reviewed_at"),
            created_at=data.get("created_at"),
            requester=ProfileSummary(**requester) if requester else None,
        )
