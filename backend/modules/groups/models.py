"""
Group chat models.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class Group(BaseModel):
    """A chat group."""

    id: str
    name: str
    description: Optional[str] = None

    model_config = {"extra": "ignore"}


class MessageSender(BaseModel):
    """Profile fields embedded with each message."""

    full_name: Optional[str] = None
    email: Optional[str] = None


class GroupMessage(BaseModel):
    """A message posted into a group."""

    id: str
    group_id: str
    sender_id: str
    message: str
    created_at: Optional[datetime] = None
    sender: Optional[MessageSender] = None


class PostMessageRequest(BaseModel):
    """Request body for posting a message."""

    message: str = Field(..., max_length=5000)


class JoinGroupResponse(BaseModel):
    """Result of a join request."""

    group_id: str
    joined: bool = Field(..., description="False when the caller was already a member")


class MessageListResponse(BaseModel):
    """Messages of a group, oldest first."""

    messages: list[GroupMessage]
