"""
Profile service.

Self-service profile operations plus the admin's direct role edit.
"""

import logging
from typing import Optional

from pydantic import BaseModel

from shared.exceptions import StoreError
from shared.models import AuthenticatedUser
from shared.repository import is_unique_violation

from .exceptions import ProfileNotFoundError
from .interfaces import IProfileRepository, IRoleResolver
from .models import Profile, Role

logger = logging.getLogger(__name__)


class CurrentUserRole(BaseModel):
    """The caller's identity together with its resolved role."""

    id: str
    email: str
    full_name: Optional[str] = None
    role: Role


class ProfileService:
    """Profile reads and writes on behalf of a single caller."""

    def __init__(self, profiles: IProfileRepository, resolver: IRoleResolver):
        self._profiles = profiles
        self._resolver = resolver

    async def get_current_user_role(self, identity: AuthenticatedUser) -> CurrentUserRole:
        """
        Describe the caller, falling back to identity claims if no profile exists.

        Never fails on store errors: the role falls back to student and the
        profile details fall back to the token claims.
        """
        role = await self._resolver.resolve_role(identity)
        try:
            profile = self._profiles.get_by_id(identity.id)
        except StoreError as e:
            logger.warning(f"Profile read failed for {identity.id}: {e}")
            profile = None

        return CurrentUserRole(
            id=identity.id,
            email=profile.email if profile and profile.email else identity.email,
            full_name=profile.full_name if profile else identity.full_name,
            role=role,
        )

    async def ensure_profile(
        self,
        identity: AuthenticatedUser,
        full_name: Optional[str] = None,
    ) -> Profile:
        """
        Return the caller's profile, creating a student profile if missing.

        Idempotent: a concurrent creator winning the insert race is treated
        as success and the existing row is returned.
        """
        existing = self._profiles.get_by_id(identity.id)
        if existing is not None:
            return existing

        name = full_name or identity.full_name or _default_name(identity.email)
        try:
            profile = self._profiles.create(identity.id, identity.email, name)
        except StoreError as e:
            if not is_unique_violation(e):
                raise
            profile = self._profiles.get_by_id(identity.id)
            if profile is None:
                raise

        logger.info(f"Created profile for {identity.id}")
        return profile

    async def set_role(self, user_id: str, role: Role) -> Profile:
        """
        Directly set a user's role. Callers must have passed the admin gate.

        Raises:
            ProfileNotFoundError: If the user has no profile.
            StoreError: If the write fails.
        """
        profile = self._profiles.update_role(user_id, role)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        logger.info(f"Role of {user_id} set to {role.value}")
        return profile


def _default_name(email: str) -> str:
    """Local part of the email, or a generic label."""
    local = email.split("@")[0] if email else ""
    return local or "User"
