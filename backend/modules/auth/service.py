"""
Access token validation.

Supabase signs user access tokens with the project's JWT secret (HS256,
audience "authenticated"). Validation happens locally; no call is made to
Supabase Auth per request.
"""

from datetime import datetime, timezone
from typing import Any, Optional
import jwt

from shared.config import get_settings

from .interfaces import IAuthService
from .models import AuthenticatedUser, JWTPayload
from .exceptions import (
    AuthNotConfiguredError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)

AUDIENCE = "authenticated"


class AuthService(IAuthService):
    """
    Turns a bearer credential into an AuthenticatedUser.

    Args:
        jwt_secret: Signing secret. Defaults to SUPABASE_JWT_SECRET.
        leeway: Allowed clock skew in seconds. Defaults to JWT_LEEWAY_SECONDS.
    """

    def __init__(self, jwt_secret: Optional[str] = None, leeway: Optional[int] = None):
        settings = get_settings() if jwt_secret is None or leeway is None else None
        self._jwt_secret = jwt_secret if jwt_secret is not None else settings.supabase_jwt_secret
        self._leeway = leeway if leeway is not None else settings.jwt_leeway_seconds

    async def validate_token(self, token: str) -> AuthenticatedUser:
        if not token:
            raise MissingTokenError()
        if not self._jwt_secret:
            raise AuthNotConfiguredError()

        claims = JWTPayload(**self._decode(token))
        return AuthenticatedUser(
            id=claims.sub,
            email=claims.email or "",
            email_verified=claims.email_confirmed_at is not None,
            full_name=claims.full_name,
            last_sign_in=datetime.fromtimestamp(claims.iat, tz=timezone.utc),
        )

    def _decode(self, token: str) -> dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self._jwt_secret,
                algorithms=["HS256"],
                audience=AUDIENCE,
                leeway=self._leeway,
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid authentication token: {e}")


# Module-level instance getter
_service_instance: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get the auth service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AuthService()
    return _service_instance


def reset_auth_service() -> None:
    """Reset the auth service singleton (for testing)."""
    global _service_instance
    _service_instance = None
