"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
import jwt  # PyJWT

from api.dependencies import reset_container
from modules.auth.service import reset_auth_service
from shared.config import get_settings
from shared.database import reset_client_cache


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

SEEDED_ADMIN_EMAIL = "operator@example.com"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    email_verified: bool = True,
    full_name: str | None = None,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a Supabase-style access token for testing.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        email_verified: Whether the email should be marked as verified
        full_name: Optional user_metadata.full_name
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "email_confirmed_at": now.isoformat() if email_verified else None,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
        "user_metadata": {"full_name": full_name} if full_name else {},
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def bearer(user_id: str, email: str | None = None) -> dict[str, str]:
    """Authorization header for a user."""
    token = create_test_token(user_id=user_id, email=email or f"{user_id}@example.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached services, clients and settings around each test."""
    reset_auth_service()
    reset_container()
    reset_client_cache()
    get_settings.cache_clear()
    yield
    reset_auth_service()
    reset_container()
    reset_client_cache()
    get_settings.cache_clear()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
