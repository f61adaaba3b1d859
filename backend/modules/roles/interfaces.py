"""
Roles module interfaces.

The lifecycle and the authorization gate depend on these protocols so that
tests can substitute in-memory stores.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import Profile, Role


@runtime_checkable
class IProfileRepository(Protocol):
    """Data access for the profiles table."""

    def get_by_id(self, user_id: str) -> Optional[Profile]:
        """Return the profile, or None if no row exists. Raises StoreError."""
        ...

    def create(self, user_id: str, email: str, full_name: Optional[str]) -> Profile:
        """Insert a student profile. Raises StoreError."""
        ...

    def update_role(
        self,
        user_id: str,
        role: Role,
        expected_role: Optional[Role] = None,
    ) -> Optional[Profile]:
        """
        Set a profile's role.

        When expected_role is given the write only applies if the current role
        matches. Returns the updated profile, or None if no row matched.
        Raises StoreError.
        """
        ...


@runtime_checkable
class IRoleResolver(Protocol):
    """Derives the effective role of an identity."""

    async def resolve_role(self, identity: AuthenticatedUser) -> Role:
        """Return the identity's role. Never raises for store failures."""
        ...
