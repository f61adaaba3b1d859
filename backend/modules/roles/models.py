"""
Role and profile models.

A profile is the one row per identity that carries its role.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Role(str, Enum):
    """Roles that govern route and API access."""

    STUDENT = "student"
    PENDING_ADMIN = "pending_admin"
    ADMIN = "admin"


class Profile(BaseModel):
    """A row of the profiles table."""

    id: str = Field(..., description="User ID (matches auth.users.id)")
    email: str = Field(default="", description="Email address")
    full_name: Optional[str] = Field(None, description="Display name")
    role: Role = Field(default=Role.STUDENT, description="Current role")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"extra": "ignore"}


class UpdateRoleRequest(BaseModel):
    """Body of an admin's direct role edit."""

    role: Role


class EnsureProfileRequest(BaseModel):
    """Body for lazily creating the caller's own profile."""

    full_name: Optional[str] = Field(None, max_length=200)
