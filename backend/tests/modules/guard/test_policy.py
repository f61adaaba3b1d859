"""Tests for navigation policy."""

import pytest

from shared.config import Settings
from shared.models import AuthenticatedUser
from modules.guard.models import GuardState, RouteRequirement
from modules.guard.policy import (
    evaluate_navigation,
    evaluate_requirement,
    is_public_route,
    landing_page,
    login_redirect,
    requirement_for_path,
)
from modules.roles.models import Role

USER = AuthenticatedUser(id="user-1", email="user@example.com")


@pytest.fixture
def settings():
    return Settings(_env_file=None)


class TestIsPublicRoute:
    @pytest.mark.parametrize("path", ["/", "/login", "/schools", "/schools/lincoln-high", "/weeks/3"])
    def test_public(self, settings, path):
        assert is_public_route(path, settings.public_routes) is True

    @pytest.mark.parametrize("path", ["/groups", "/loginx", "/schoolsx", "/admin"])
    def test_not_public(self, settings, path):
        assert is_public_route(path, settings.public_routes) is False

    def test_root_does_not_cover_everything(self):
        assert is_public_route("/dashboard", ["/"]) is False


class TestRedirects:
    def test_login_redirect_preserves_path(self, settings):
        assert login_redirect("/admin/requests", settings) == "/login?redirectTo=%2Fadmin%2Frequests"

    @pytest.mark.parametrize(
        "role,expected",
        [
            (Role.ADMIN, "/admin/dashboard"),
            (Role.PENDING_ADMIN, "/student/dashboard"),
            (Role.STUDENT, "/student/dashboard"),
        ],
    )
    def test_landing_page(self, settings, role, expected):
        assert landing_page(role, settings) == expected


class TestEvaluateRequirement:
    def test_anonymous_on_protected_route(self, settings):
        decision = evaluate_requirement(RouteRequirement(), "/groups", None, None, settings)

        assert decision.state == GuardState.REDIRECTING
        assert decision.redirect_to == "/login?redirectTo=%2Fgroups"

    def test_anonymous_on_admin_route_goes_to_login(self, settings):
        requirement = RouteRequirement(require_auth=False, require_admin=True)
        decision = evaluate_requirement(requirement, "/admin", None, None, settings)

        assert decision.redirect_to.startswith("/login?")

    def test_anonymous_on_open_route(self, settings):
        decision = evaluate_requirement(RouteRequirement(require_auth=False), "/", None, None, settings)
        assert decision.state == GuardState.AUTHORIZED

    @pytest.mark.parametrize("role", [Role.STUDENT, Role.PENDING_ADMIN])
    def test_non_admin_on_admin_route(self, settings, role):
        requirement = RouteRequirement(require_admin=True)
        decision = evaluate_requirement(requirement, "/admin/dashboard", USER, role, settings)

        assert decision.state == GuardState.REDIRECTING
        assert decision.redirect_to == "/student/dashboard"
        assert decision.role == role

    def test_admin_on_admin_route(self, settings):
        requirement = RouteRequirement(require_admin=True)
        decision = evaluate_requirement(requirement, "/admin/dashboard", USER, Role.ADMIN, settings)

        assert decision.state == GuardState.AUTHORIZED
        assert decision.redirect_to is None

    def test_admin_on_student_only_route(self, settings):
        requirement = RouteRequirement(student_only=True)
        decision = evaluate_requirement(requirement, "/student/dashboard", USER, Role.ADMIN, settings)

        assert decision.redirect_to == "/admin/dashboard"

    def test_unresolved_role_treated_as_student(self, settings):
        requirement = RouteRequirement(require_admin=True)
        decision = evaluate_requirement(requirement, "/admin", USER, None, settings)

        assert decision.state == GuardState.REDIRECTING
        assert decision.role == Role.STUDENT


class TestRouteTable:
    def test_admin_prefix(self, settings):
        assert requirement_for_path("/admin/requests", settings).require_admin is True

    def test_admin_prefix_needs_separator(self, settings):
        assert requirement_for_path("/administrator", settings).require_admin is False

    def test_student_prefix(self, settings):
        assert requirement_for_path("/student/dashboard", settings).student_only is True

    def test_public(self, settings):
        assert requirement_for_path("/schools", settings).require_auth is False

    def test_everything_else_needs_auth(self, settings):
        requirement = requirement_for_path("/groups/abc", settings)
        assert requirement.require_auth is True
        assert requirement.require_admin is False


class TestEvaluateNavigation:
    def test_signed_in_user_on_login_page(self, settings):
        decision = evaluate_navigation("/login", USER, Role.ADMIN, settings)

        assert decision.state == GuardState.REDIRECTING
        assert decision.redirect_to == "/admin/dashboard"

    def test_anonymous_on_login_page(self, settings):
        decision = evaluate_navigation("/login", None, None, settings)
        assert decision.state == GuardState.AUTHORIZED

    def test_anonymous_on_admin_page(self, settings):
        decision = evaluate_navigation("/admin/users", None, None, settings)
        assert decision.redirect_to == "/login?redirectTo=%2Fadmin%2Fusers"

    def test_promoted_user_admitted_on_next_navigation(self, settings):
        before = evaluate_navigation("/admin/dashboard", USER, Role.PENDING_ADMIN, settings)
        after = evaluate_navigation("/admin/dashboard", USER, Role.ADMIN, settings)

        assert before.state == GuardState.REDIRECTING
        assert after.state == GuardState.AUTHORIZED
