"""
Navigation policy.

Pure functions that decide whether a visitor may see a route. Used by the
RouteGuard state machine and by the /api/guard/check endpoint that the
frontend calls on every navigation.
"""

from typing import Optional
from urllib.parse import urlencode

from shared.config import Settings, get_settings
from shared.models import AuthenticatedUser
from modules.roles.models import Role

from .models import GuardDecision, GuardState, RouteRequirement

ADMIN_PREFIX = "/admin"
STUDENT_PREFIX = "/student"


def is_public_route(path: str, public_routes: list[str]) -> bool:
    """Exact match, or a sub-path of a public route other than the root."""
    for route in public_routes:
        if path == route:
            return True
        if route != "/" and path.startswith(route + "/"):
            return True
    return False


def _under(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix + "/")


def landing_page(role: Role, settings: Optional[Settings] = None) -> str:
    """Dashboard a role lands on after sign-in."""
    settings = settings or get_settings()
    if role == Role.ADMIN:
        return settings.admin_landing_path
    return settings.student_landing_path


def login_redirect(path: str, settings: Optional[Settings] = None) -> str:
    """Login location that returns the visitor to path afterwards."""
    settings = settings or get_settings()
    return f"{settings.login_path}?{urlencode({'redirectTo': path})}"


def evaluate_requirement(
    requirement: RouteRequirement,
    path: str,
    identity: Optional[AuthenticatedUser],
    role: Optional[Role],
    settings: Optional[Settings] = None,
) -> GuardDecision:
    """
    Decide a navigation to a route with an explicit requirement.

    role is ignored when identity is None.
    """
    settings = settings or get_settings()

    if identity is None:
        if requirement.require_auth or requirement.require_admin:
            return GuardDecision(
                state=GuardState.REDIRECTING,
                path=path,
                redirect_to=login_redirect(path, settings),
            )
        return GuardDecision(state=GuardState.AUTHORIZED, path=path)

    role = role or Role.STUDENT
    if requirement.require_admin and role != Role.ADMIN:
        return GuardDecision(
            state=GuardState.REDIRECTING,
            path=path,
            redirect_to=landing_page(role, settings),
            role=role,
        )
    if requirement.student_only and role == Role.ADMIN:
        return GuardDecision(
            state=GuardState.REDIRECTING,
            path=path,
            redirect_to=landing_page(role, settings),
            role=role,
        )
    return GuardDecision(state=GuardState.AUTHORIZED, path=path, role=role)


def requirement_for_path(path: str, settings: Optional[Settings] = None) -> RouteRequirement:
    """Requirement implied by the route table."""
    settings = settings or get_settings()
    if _under(path, ADMIN_PREFIX):
        return RouteRequirement(require_auth=True, require_admin=True)
    if _under(path, STUDENT_PREFIX):
        return RouteRequirement(require_auth=True, student_only=True)
    if is_public_route(path, settings.public_routes):
        return RouteRequirement(require_auth=False)
    return RouteRequirement(require_auth=True)


def evaluate_navigation(
    path: str,
    identity: Optional[AuthenticatedUser],
    role: Optional[Role],
    settings: Optional[Settings] = None,
) -> GuardDecision:
    """
    Decide a navigation using the route table alone.

    Signed-in visitors on the login page are sent to their landing page.
    """
    settings = settings or get_settings()
    if identity is not None and path == settings.login_path:
        resolved = role or Role.STUDENT
        return GuardDecision(
            state=GuardState.REDIRECTING,
            path=path,
            redirect_to=landing_page(resolved, settings),
            role=resolved,
        )
    return evaluate_requirement(requirement_for_path(path, settings), path, identity, role, settings)
