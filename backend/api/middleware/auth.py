"""
Bearer authentication and authorization dependencies.

Extracts the Supabase access token from the Authorization header and runs
it through the AuthorizationGate. Failures raise the gate's exceptions,
which api/errors.py turns into 401/403/404 responses.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser
from modules.access.gate import AuthorizationGate
from modules.access.models import AccessGrant

from ..dependencies import get_gate

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """The raw bearer credential, if one was sent."""
    if credentials is None:
        return None
    return credentials.credentials


async def get_current_user(
    token: Optional[str] = Depends(get_bearer_token),
    gate: AuthorizationGate = Depends(get_gate),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication but no privilege.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    return await gate.authenticate(token)


async def get_optional_user(
    token: Optional[str] = Depends(get_bearer_token),
    gate: AuthorizationGate = Depends(get_gate),
) -> Optional[AuthenticatedUser]:
    """
    Dependency that optionally extracts user if authenticated.

    A missing or invalid token yields None instead of an error.
    """
    if not token:
        return None

    try:
        return await gate.authenticate(token)
    except AuthenticationError:
        return None


async def require_user(
    token: Optional[str] = Depends(get_bearer_token),
    gate: AuthorizationGate = Depends(get_gate),
) -> AccessGrant:
    """Grant for any authenticated identity."""
    return await gate.require_user(token)


async def require_admin(
    token: Optional[str] = Depends(get_bearer_token),
    gate: AuthorizationGate = Depends(get_gate),
) -> AccessGrant:
    """Grant for identities that resolve to admin."""
    return await gate.require_admin(token)


async def require_group_member(
    group_id: str,
    token: Optional[str] = Depends(get_bearer_token),
    gate: AuthorizationGate = Depends(get_gate),
) -> AccessGrant:
    """Grant for members of the group named by the group_id path parameter."""
    return await gate.require_member(token, group_id)


# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)
OptionalAuth = Depends(get_optional_user)
