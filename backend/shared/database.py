"""
Supabase client factory.

Two credential tiers:
- service role: bypasses Row Level Security. Cached, and handed to route
  code only through an AccessGrant from modules.access.gate.
- end user (anon key + the caller's access token): Row Level Security
  applies. Built per request, never cached.
"""

from typing import Optional
from supabase import create_client, Client

from .config import get_settings

_service_client: Optional[Client] = None


def _create(url: str, key: str, key_env: str) -> Client:
    missing = [name for name, value in (("SUPABASE_URL", url), (key_env, key)) if not value]
    if missing:
        raise RuntimeError(
            f"Supabase configuration missing. Set {' and '.join(missing)} environment variables."
        )
    return create_client(url, key)


def get_supabase_client() -> Client:
    """
    Get the service-role client.

    Only modules.access.gate should call this. Route handlers receive the
    client through an AccessGrant once the gate's own checks have passed.
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        _service_client = _create(
            settings.supabase_url,
            settings.supabase_service_role_key,
            "SUPABASE_SERVICE_ROLE_KEY",
        )
    return _service_client


def get_supabase_user_client(access_token: str) -> Client:
    """
    Get a client whose table queries run as the token's user.

    Used where Row Level Security is sufficient, such as a user reading or
    creating their own profile row.
    """
    settings = get_settings()
    client = _create(settings.supabase_url, settings.supabase_anon_key, "SUPABASE_ANON_KEY")
    # PostgREST requests carry the user's JWT; no session refresh needed on the backend
    client.postgrest.auth(access_token)
    return client


def reset_client_cache() -> None:
    """Drop the cached service-role client (tests, config changes)."""
    global _service_client
    _service_client = None
