"""
Groups module interfaces.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import Group, GroupMessage


@runtime_checkable
class IGroupRepository(Protocol):
    """Data access for groups, memberships and messages."""

    def get_group(self, group_id: str) -> Optional[Group]:
        ...

    def is_member(self, group_id: str, user_id: str) -> bool:
        ...

    def add_member(self, group_id: str, user_id: str) -> None:
        ...

    def list_messages(self, group_id: str) -> list[GroupMessage]:
        ...

    def insert_message(self, group_id: str, sender_id: str, message: str) -> GroupMessage:
        ...
