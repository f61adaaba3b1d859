"""
Group chat service.

Membership for message endpoints is enforced by the authorization gate
before this service is constructed. join() is open to any authenticated
user and checks only that the group exists.
"""

import logging

from shared.exceptions import StoreError
from shared.repository import is_unique_violation

from .exceptions import EmptyMessageError, GroupNotFoundError
from .interfaces import IGroupRepository
from .models import GroupMessage, JoinGroupResponse

logger = logging.getLogger(__name__)


class GroupService:
    """Group operations on behalf of an authorized caller."""

    def __init__(self, groups: IGroupRepository):
        self._groups = groups

    async def join(self, group_id: str, user_id: str) -> JoinGroupResponse:
        if self._groups.get_group(group_id) is None:
            raise GroupNotFoundError(group_id)

        if self._groups.is_member(group_id, user_id):
            return JoinGroupResponse(group_id=group_id, joined=False)

        try:
            self._groups.add_member(group_id, user_id)
        except StoreError as e:
            if not is_unique_violation(e):
                raise
            return JoinGroupResponse(group_id=group_id, joined=False)

        logger.info(f"User {user_id} joined group {group_id}")
        return JoinGroupResponse(group_id=group_id, joined=True)

    async def list_messages(self, group_id: str) -> list[GroupMessage]:
        return self._groups.list_messages(group_id)

    async def post_message(self, group_id: str, sender_id: str, message: str) -> GroupMessage:
        text = message.strip()
        if not text:
            raise EmptyMessageError()
        return self._groups.insert_message(group_id, sender_id, text)
