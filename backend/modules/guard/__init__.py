"""
Guard module.

Navigation policy and the RouteGuard state machine.
"""

from .models import GuardDecision, GuardState, RouteRequirement
from .policy import evaluate_navigation, evaluate_requirement
from .guard import RouteGuard, Navigator

__all__ = [
    "GuardDecision",
    "GuardState",
    "RouteRequirement",
    "evaluate_navigation",
    "evaluate_requirement",
    "RouteGuard",
    "Navigator",
]
