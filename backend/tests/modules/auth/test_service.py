import pytest
from unittest.mock import patch
import jwt
from datetime import datetime, timedelta, timezone

from modules.auth.service import AuthService, get_auth_service, reset_auth_service
from modules.auth.exceptions import (
    AuthNotConfiguredError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)


def _payload(**overrides):
    payload = {
        "sub": "user-123",
        "email": "test@example.com",
        "exp": datetime.now(timezone.utc) + timedelta(hours=1),
        "iat": datetime.now(timezone.utc),
        "aud": "authenticated",
        "role": "authenticated",
    }
    payload.update(overrides)
    return payload


class TestAuthService:
    @pytest.fixture
    def service(self):
        """Create auth service with an explicit secret."""
        return AuthService(jwt_secret="test-secret")

    @pytest.fixture
    def valid_token(self):
        """Create a valid JWT token."""
        return jwt.encode(_payload(), "test-secret", algorithm="HS256")

    @pytest.fixture
    def expired_token(self):
        """Create an expired JWT token."""
        payload = _payload(
            exp=datetime.now(timezone.utc) - timedelta(hours=1),
            iat=datetime.now(timezone.utc) - timedelta(hours=2),
        )
        return jwt.encode(payload, "test-secret", algorithm="HS256")

    @pytest.mark.asyncio
    async def test_validate_valid_token(self, service, valid_token):
        """Should validate a valid token and return user."""
        user = await service.validate_token(valid_token)
        assert user.id == "user-123"
        assert user.email == "test@example.com"
        assert user.last_sign_in is not None

    @pytest.mark.asyncio
    async def test_email_verified_from_confirmation_claim(self, service):
        """email_confirmed_at marks the email as verified."""
        token = jwt.encode(
            _payload(email_confirmed_at="2024-01-01T00:00:00Z"),
            "test-secret",
            algorithm="HS256",
        )
        user = await service.validate_token(token)
        assert user.email_verified is True

    @pytest.mark.asyncio
    async def test_unconfirmed_email_not_verified(self, service, valid_token):
        user = await service.validate_token(valid_token)
        assert user.email_verified is False

    @pytest.mark.asyncio
    async def test_full_name_from_user_metadata(self, service):
        token = jwt.encode(
            _payload(user_metadata={"full_name": "Ada Lovelace"}),
            "test-secret",
            algorithm="HS256",
        )
        user = await service.validate_token(token)
        assert user.full_name == "Ada Lovelace"

    @pytest.mark.asyncio
    async def test_token_without_email(self, service):
        """Phone sign-ins carry no email; it becomes an empty string."""
        payload = _payload()
        del payload["email"]
        token = jwt.encode(payload, "test-secret", algorithm="HS256")
        user = await service.validate_token(token)
        assert user.email == ""

    @pytest.mark.asyncio
    async def test_validate_expired_token(self, service, expired_token):
        """Should raise ExpiredTokenError for expired token."""
        with pytest.raises(ExpiredTokenError):
            await service.validate_token(expired_token)

    @pytest.mark.asyncio
    async def test_validate_invalid_token(self, service):
        """Should raise InvalidTokenError for malformed token."""
        with pytest.raises(InvalidTokenError):
            await service.validate_token("not-a-valid-token")

    @pytest.mark.asyncio
    async def test_validate_missing_token(self, service):
        """Should raise MissingTokenError for empty token."""
        with pytest.raises(MissingTokenError):
            await service.validate_token("")

    @pytest.mark.asyncio
    async def test_validate_none_token(self, service):
        """Should raise MissingTokenError for None token."""
        with pytest.raises(MissingTokenError):
            await service.validate_token(None)

    @pytest.mark.asyncio
    async def test_validate_wrong_secret(self, service):
        """Should raise InvalidTokenError for token signed with wrong secret."""
        wrong_secret_token = jwt.encode(_payload(), "wrong-secret", algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            await service.validate_token(wrong_secret_token)

    @pytest.mark.asyncio
    async def test_validate_wrong_audience(self, service):
        """Should raise InvalidTokenError for token with wrong audience."""
        wrong_aud_token = jwt.encode(_payload(aud="wrong-audience"), "test-secret", algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            await service.validate_token(wrong_aud_token)

    @pytest.mark.asyncio
    async def test_no_secret_configured(self, valid_token):
        """Without a secret no token can be validated."""
        service = AuthService(jwt_secret="")
        with pytest.raises(AuthNotConfiguredError):
            await service.validate_token(valid_token)

    @pytest.mark.asyncio
    async def test_secret_defaults_to_settings(self, valid_token):
        with patch("modules.auth.service.get_settings") as mock_settings:
            mock_settings.return_value.supabase_jwt_secret = "test-secret"
            mock_settings.return_value.jwt_leeway_seconds = 0
            service = AuthService()
        user = await service.validate_token(valid_token)
        assert user.id == "user-123"


    @pytest.mark.asyncio
    async def test_leeway_tolerates_clock_skew(self):
        payload = _payload(exp=datetime.now(timezone.utc) - timedelta(seconds=5))
        token = jwt.encode(payload, "test-secret", algorithm="HS256")

        user = await AuthService(jwt_secret="test-secret", leeway=30).validate_token(token)

        assert user.id == "user-123"

    @pytest.mark.asyncio
    async def test_token_without_subject(self, service):
        payload = _payload()
        del payload["sub"]
        token = jwt.encode(payload, "test-secret", algorithm="HS256")

        with pytest.raises(InvalidTokenError):
            await service.validate_token(token)


class TestAuthServiceSingleton:
    def test_singleton_is_cached(self):
        assert get_auth_service() is get_auth_service()

    def test_reset_creates_new_instance(self):
        first = get_auth_service()
        reset_auth_service()
        assert get_auth_service() is not first
