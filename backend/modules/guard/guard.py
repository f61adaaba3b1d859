"""
Route guard state machine.

    loading --(no identity, auth required)-----> redirecting (login)
    loading --(role does not fit the route)----> redirecting (landing page)
    loading --(otherwise)----------------------> authorized

redirecting is terminal for one navigation. navigate() starts a new
evaluation, so a role that changed since the last navigation (for example
an approved admin request) is picked up.
"""

import logging
from typing import Optional, Protocol, TypeVar

from shared.config import Settings
from shared.models import AuthenticatedUser
from modules.roles.models import Role

from .models import GuardDecision, GuardState, RouteRequirement
from .policy import evaluate_requirement

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Navigator(Protocol):
    """Performs client-side navigation."""

    def redirect(self, location: str) -> None:
        ...


class RouteGuard:
    """Guards one route; re-evaluated on every navigation."""

    def __init__(
        self,
        requirement: RouteRequirement,
        navigator: Navigator,
        settings: Optional[Settings] = None,
    ):
        self._requirement = requirement
        self._navigator = navigator
        self._settings = settings
        self._path = "/"
        self._decision: Optional[GuardDecision] = None

    @property
    def state(self) -> GuardState:
        if self._decision is None:
            return GuardState.LOADING
        return self._decision.state

    @property
    def decision(self) -> Optional[GuardDecision]:
        return self._decision

    def navigate(self, path: str) -> None:
        """Start evaluating a navigation to path."""
        self._path = path
        self._decision = None

    def resolve(
        self,
        identity: Optional[AuthenticatedUser],
        role: Optional[Role],
    ) -> GuardDecision:
        """
        Complete the pending evaluation once role resolution finishes.

        Issues at most one redirect per navigation; calling again before the
        next navigate() returns the existing decision.
        """
        if self._decision is not None:
            return self._decision

        decision = evaluate_requirement(
            self._requirement, self._path, identity, role, self._settings
        )
        self._decision = decision
        if decision.state == GuardState.REDIRECTING and decision.redirect_to:
            logger.debug(f"Guard redirecting {self._path} -> {decision.redirect_to}")
            self._navigator.redirect(decision.redirect_to)
        return decision

    def render(self, children: T) -> Optional[T]:
        """children when authorized, otherwise nothing."""
        if self.state == GuardState.AUTHORIZED:
            return children
        return None
