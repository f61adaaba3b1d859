"""
Profile repository for database access.

Encapsulates all Supabase queries against the profiles table.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Profile, Role


class ProfileRepository(BaseRepository[Profile]):
    """
    Repository for profile data access.

    Note: This repository does NOT perform authorization checks.
    Callers are responsible for passing the gate first.
    """

    TABLE = "profiles"

    def get_by_id(self, user_id: str) -> Optional[Profile]:
        """
        Get a profile by user ID.

        Returns:
            Profile if a row exists, None otherwise.

        Raises:
            StoreError: If the query fails.
        """
        result = self._execute(
            "get profile",
            lambda: self._db.table(self.TABLE).select("*").eq("id", user_id).execute(),
        )
        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    def create(self, user_id: str, email: str, full_name: Optional[str]) -> Profile:
        """
        Insert a new profile with the default student role.

        Raises:
            StoreError: If the insert fails (including a duplicate id).
        """
        data = {
            "id": user_id,
            "email": email,
            "full_name": full_name,
            "role": Role.STUDENT.value,
        }
        result = self._execute(
            "create profile",
            lambda: self._db.table(self.TABLE).insert(data).execute(),
        )
        return self._map_to_profile(result.data[0])

    def update_role(
        self,
        user_id: str,
        role: Role,
        expected_role: Optional[Role] = None,
    ) -> Optional[Profile]:
        """
        Set a profile's role, optionally only if it currently has expected_role.

        Returns:
            The updated profile, or None if no row matched.

        Raises:
            StoreError: If the update fails.
        """
        data: dict[str, Any] = {
            "role": role.value,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }

        def query():
            q = self._db.table(self.TABLE).update(data).eq("id", user_id)
            if expected_role is not None:
                q = q.eq("role", expected_role.value)
            return q.execute()

        result = self._execute("update profile role", query)
        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    def _map_to_profile(self, data: dict[str, Any]) -> Profile:
        """Map a database row to a Profile, treating a null role as student."""
        return Profile(
            id=str(data["id"]),
            email=data.get("email") or "",
            full_name=data.get("full_name"),
            role=Role(data.get("role") or Role.STUDENT.value),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
