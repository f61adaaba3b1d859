"""
Groups module.

Group membership is the resource check behind the member-only gate.
"""

from .interfaces import IGroupRepository
from .models import Group, GroupMessage, PostMessageRequest, JoinGroupResponse
from .exceptions import GroupNotFoundError, NotGroupMemberError, EmptyMessageError

__all__ = [
    "IGroupRepository",
    "Group",
    "GroupMessage",
    "PostMessageRequest",
    "JoinGroupResponse",
    "GroupNotFoundError",
    "NotGroupMemberError",
    "EmptyMessageError",
]
