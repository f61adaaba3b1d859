"""
Group repository for database access.

Encapsulates Supabase queries for the group tables:
- groups
- group_members
- group_messages
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Group, GroupMessage, MessageSender

MESSAGE_SELECT = "*, profiles:sender_id(full_name, email)"


class GroupRepository(BaseRepository[Group]):
    """
    Repository for group data access.

    Membership reads cross user boundaries, so this repository is built on
    the privileged client handed out by the authorization gate.
    """

    def get_group(self, group_id: str) -> Optional[Group]:
        result = self._execute(
            "get group",
            lambda: self._db.table("groups").select("id, name, description").eq("id", group_id).execute(),
        )
        if not result.data:
            return None
        row = result.data[0]
        return Group(id=str(row["id"]), name=row["name"], description=row.get("description"))

    def is_member(self, group_id: str, user_id: str) -> bool:
        result = self._execute(
            "check group membership",
            lambda: self._db.table("group_members")
            .select("id")
            .eq("group_id", group_id)
            .eq("user_id", user_id)
            .execute(),
        )
        return bool(result.data)

    def add_member(self, group_id: str, user_id: str) -> None:
        self._execute(
            "add group member",
            lambda: self._db.table("group_members")
            .insert({"group_id": group_id, "user_id": user_id})
            .execute(),
        )

    def list_messages(self, group_id: str) -> list[GroupMessage]:
        result = self._execute(
            "list group messages",
            lambda: self._db.table("group_messages")
            .select(MESSAGE_SELECT)
            .eq("group_id", group_id)
            .order("created_at")
            .execute(),
        )
        return [self._map_to_message(row) for row in result.data]

    def insert_message(self, group_id: str, sender_id: str, message: str) -> GroupMessage:
        data = {"group_id": group_id, "sender_id": sender_id, "message": message}
        inserted = self._execute(
            "insert group message",
            lambda: self._db.table("group_messages").insert(data).execute(),
        )
        return self._map_to_message(inserted.data[0])

    def _map_to_message(self, row: dict[str, Any]) -> GroupMessage:
        sender = row.get("profiles")
        return GroupMessage(
            id=str(row["id"]),
            group_id=str(row["group_id"]),
            sender_id=str(row["sender_id"]),
            message=row["message"],
            created_at=row.get("created_at"),
            sender=MessageSender(**sender) if sender else None,
        )
