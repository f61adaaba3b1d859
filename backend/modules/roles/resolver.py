"""
Role resolution.

Every protected route and API call derives the caller's role through
RoleResolver.resolve_role, so the policy lives in exactly one place:

1. The seeded admin email resolves to admin without touching the store.
2. Otherwise the profile's role column is used.
3. A missing row or a failed lookup resolves to student.

Step 3 fails open to the least-privileged role for reads only. Writes that
change roles surface StoreError to the caller.
"""

import logging
from typing import Optional

from shared.config import get_settings
from shared.exceptions import StoreError
from shared.models import AuthenticatedUser

from .interfaces import IProfileRepository, IRoleResolver
from .models import Role

logger = logging.getLogger(__name__)


class RoleResolver(IRoleResolver):
    """Resolves an identity to its effective role. No caching across calls."""

    def __init__(
        self,
        profiles: IProfileRepository,
        seeded_admin_email: Optional[str] = None,
    ):
        self._profiles = profiles
        if seeded_admin_email is None:
            seeded_admin_email = get_settings().seeded_admin_email
        self._seeded_admin_email = seeded_admin_email

    def is_seeded_admin(self, identity: AuthenticatedUser) -> bool:
        """Exact match against the configured operator address."""
        return bool(self._seeded_admin_email) and identity.email == self._seeded_admin_email

    async def resolve_role(self, identity: AuthenticatedUser) -> Role:
        if self.is_seeded_admin(identity):
            return Role.ADMIN

        try:
            profile = self._profiles.get_by_id(identity.id)
        except (StoreError, ValueError) as e:
            logger.warning(f"Role lookup failed for {identity.id}, defaulting to student: {e}")
            return Role.STUDENT

        if profile is None:
            logger.debug(f"No profile for {identity.id}, defaulting to student")
            return Role.STUDENT

        return profile.role
