"""Tests for role resolution."""

import pytest
from unittest.mock import MagicMock, patch

from shared.exceptions import StoreError
from shared.models import AuthenticatedUser
from modules.roles.models import Role
from modules.roles.resolver import RoleResolver
from tests.fakes import FakeProfileRepository

SEEDED = "operator@example.com"


def _user(user_id: str = "user-1", email: str = "user@example.com") -> AuthenticatedUser:
    return AuthenticatedUser(id=user_id, email=email)


class TestSeededAdmin:
    @pytest.mark.asyncio
    async def test_seeded_email_is_admin_without_profile(self):
        """The operator resolves to admin even with no profile row."""
        profiles = FakeProfileRepository()
        resolver = RoleResolver(profiles, seeded_admin_email=SEEDED)

        assert await resolver.resolve_role(_user(email=SEEDED)) == Role.ADMIN

    @pytest.mark.asyncio
    async def test_seeded_email_ignores_stored_role(self):
        profiles = FakeProfileRepository()
        profiles.add("user-1", Role.STUDENT, email=SEEDED)
        resolver = RoleResolver(profiles, seeded_admin_email=SEEDED)

        assert await resolver.resolve_role(_user(email=SEEDED)) == Role.ADMIN

    @pytest.mark.asyncio
    async def test_seeded_email_skips_store(self):
        """No lookup happens for the operator, so store faults cannot demote it."""
        profiles = MagicMock()
        resolver = RoleResolver(profiles, seeded_admin_email=SEEDED)

        assert await resolver.resolve_role(_user(email=SEEDED)) == Role.ADMIN
        profiles.get_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_match_is_exact(self):
        profiles = FakeProfileRepository()
        resolver = RoleResolver(profiles, seeded_admin_email=SEEDED)

        assert await resolver.resolve_role(_user(email="Operator@example.com")) == Role.STUDENT
        assert await resolver.resolve_role(_user(email=SEEDED + ".evil")) == Role.STUDENT

    @pytest.mark.asyncio
    async def test_empty_setting_disables_bypass(self):
        """An identity without email must not match an unset operator address."""
        profiles = FakeProfileRepository()
        resolver = RoleResolver(profiles, seeded_admin_email="")

        assert resolver.is_seeded_admin(_user(email="")) is False
        assert await resolver.resolve_role(_user(email="")) == Role.STUDENT

    def test_defaults_to_configured_address(self):
        with patch("modules.roles.resolver.get_settings") as mock_settings:
            mock_settings.return_value.seeded_admin_email = SEEDED
            resolver = RoleResolver(FakeProfileRepository())

        assert resolver.is_seeded_admin(_user(email=SEEDED)) is True


class TestProfileRole:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", [Role.STUDENT, Role.PENDING_ADMIN, Role.ADMIN])
    async def test_returns_stored_role(self, role):
        profiles = FakeProfileRepository()
        profiles.add("user-1", role)
        resolver = RoleResolver(profiles, seeded_admin_email=SEEDED)

        assert await resolver.resolve_role(_user()) == role

    @pytest.mark.asyncio
    async def test_missing_profile_is_student(self):
        resolver = RoleResolver(FakeProfileRepository(), seeded_admin_email=SEEDED)

        assert await resolver.resolve_role(_user()) == Role.STUDENT

    @pytest.mark.asyncio
    async def test_store_failure_is_student(self):
        """A failed lookup falls back to the least privileged role."""
        profiles = FakeProfileRepository()
        profiles.add("user-1", Role.ADMIN)
        profiles.fail_reads = True
        resolver = RoleResolver(profiles, seeded_admin_email=SEEDED)

        assert await resolver.resolve_role(_user()) == Role.STUDENT

    @pytest.mark.asyncio
    async def test_unknown_role_value_is_student(self):
        profiles = MagicMock()
        profiles.get_by_id.side_effect = ValueError("'superuser' is not a valid Role")
        resolver = RoleResolver(profiles, seeded_admin_email=SEEDED)

        assert await resolver.resolve_role(_user()) == Role.STUDENT

    @pytest.mark.asyncio
    async def test_store_failure_is_logged(self, caplog):
        profiles = MagicMock()
        profiles.get_by_id.side_effect = StoreError("timeout", operation="get profile")
        resolver = RoleResolver(profiles, seeded_admin_email=SEEDED)

        with caplog.at_level("WARNING", logger="modules.roles.resolver"):
            await resolver.resolve_role(_user())

        assert "defaulting to student" in caplog.text

    @pytest.mark.asyncio
    async def test_no_caching_between_calls(self):
        """A role change is visible on the very next resolution."""
        profiles = FakeProfileRepository()
        profiles.add("user-1", Role.PENDING_ADMIN)
        resolver = RoleResolver(profiles, seeded_admin_email=SEEDED)

        assert await resolver.resolve_role(_user()) == Role.PENDING_ADMIN
        profiles.update_role("user-1", Role.ADMIN)
        assert await resolver.resolve_role(_user()) == Role.ADMIN
