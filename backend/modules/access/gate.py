"""
API authorization gate.

Every API call that needs the service-role client goes through one of the
gate's require_* methods. The service-role client bypasses Row Level
Security, so the gate performs the authorization check in code and only
then hands the client out inside an AccessGrant:

    token -> identity (IAuthService) -> role or membership -> check -> grant

Role and membership lookups run on the caller's own token-scoped client,
under Row Level Security. The service-role client is created only in
_grant, after every check has passed, and is never returned by any other
path.
"""

import logging
from typing import Callable, Optional

from supabase import Client

from shared.database import get_supabase_client, get_supabase_user_client
from shared.models import AuthenticatedUser
from modules.auth.interfaces import IAuthService
from modules.auth.exceptions import MissingTokenError
from modules.roles.exceptions import ForbiddenError
from modules.roles.interfaces import IProfileRepository
from modules.roles.models import Role
from modules.roles.repository import ProfileRepository
from modules.roles.resolver import RoleResolver
from modules.groups.exceptions import GroupNotFoundError, NotGroupMemberError
from modules.groups.interfaces import IGroupRepository
from modules.groups.repository import GroupRepository

from .models import AccessGrant

logger = logging.getLogger(__name__)


class AuthorizationGate:
    """
    Authenticates a bearer token and authorizes it for a privilege level.

    Args:
        auth: Token validator.
        client_factory: Returns the privileged client. Only called once a
            check has passed.
        user_client_factory: Builds a client that acts as the token's user,
            for the gate's own lookups.
        seeded_admin_email: Override for the configured operator address.
        profiles_factory: Builds the profile repository from a client.
        groups_factory: Builds the group repository from a client.
    """

    def __init__(
        self,
        auth: IAuthService,
        client_factory: Callable[[], Client] = get_supabase_client,
        user_client_factory: Callable[[str], Client] = get_supabase_user_client,
        seeded_admin_email: Optional[str] = None,
        profiles_factory: Callable[[Client], IProfileRepository] = ProfileRepository,
        groups_factory: Callable[[Client], IGroupRepository] = GroupRepository,
    ):
        self._auth = auth
        self._client_factory = client_factory
        self._user_client_factory = user_client_factory
        self._seeded_admin_email = seeded_admin_email
        self._profiles_factory = profiles_factory
        self._groups_factory = groups_factory

    async def authenticate(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Validate the bearer credential.

        Raises:
            AuthenticationError: If the token is missing, invalid or expired.
        """
        if not token:
            raise MissingTokenError()
        return await self._auth.validate_token(token)

    async def resolve(self, user: AuthenticatedUser, token: str) -> Role:
        """Resolve the role of an identity already authenticated by token."""
        profiles = self._profiles_factory(self._user_client_factory(token))
        resolver = RoleResolver(profiles, self._seeded_admin_email)
        return await resolver.resolve_role(user)

    async def require_user(self, token: Optional[str]) -> AccessGrant:
        """Any authenticated identity."""
        user = await self.authenticate(token)
        role = await self.resolve(user, token)
        return self._grant(user, role)

    async def require_admin(self, token: Optional[str]) -> AccessGrant:
        """
        Authenticated identity whose resolved role is admin.

        Raises:
            ForbiddenError: If the role is anything else.
        """
        user = await self.authenticate(token)
        role = await self.resolve(user, token)
        if role != Role.ADMIN:
            logger.info(f"Admin access denied for {user.id} (role={role.value})")
            raise ForbiddenError(Role.ADMIN.value, role.value)
        return self._grant(user, role)

    async def require_member(self, token: Optional[str], group_id: str) -> AccessGrant:
        """
        Authenticated identity with a membership row for group_id.

        Raises:
            GroupNotFoundError: If the group does not exist.
            NotGroupMemberError: If the identity is not a member.
        """
        user = await self.authenticate(token)
        groups = self._groups_factory(self._user_client_factory(token))
        if groups.get_group(group_id) is None:
            raise GroupNotFoundError(group_id)
        if not groups.is_member(group_id, user.id):
            logger.info(f"Group access denied for {user.id} on {group_id}")
            raise NotGroupMemberError(group_id, user.id)
        role = await self.resolve(user, token)
        return self._grant(user, role)

    def _grant(self, user: AuthenticatedUser, role: Role) -> AccessGrant:
        return AccessGrant(user=user, role=role, client=self._client_factory())
