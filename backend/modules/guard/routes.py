"""
Route guard endpoint.

The frontend calls this on every navigation, so role changes made since the
previous navigation take effect immediately.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_gate
from api.middleware.auth import OptionalAuth, get_bearer_token
from modules.access.gate import AuthorizationGate
from shared.models import AuthenticatedUser

from .models import GuardDecision
from .policy import evaluate_navigation

router = APIRouter()


@router.get("/check", response_model=GuardDecision)
async def check_navigation(
    path: str = Query(..., min_length=1, description="Path the visitor is navigating to"),
    user: Optional[AuthenticatedUser] = OptionalAuth,
    token: Optional[str] = Depends(get_bearer_token),
    gate: AuthorizationGate = Depends(get_gate),
) -> GuardDecision:
    """
    Decide whether the visitor may see path.

    Never fails for a bad or missing token; the visitor is treated as
    signed out and redirected to login where the route requires it.
    """
    role = await gate.resolve(user, token) if user is not None else None
    return evaluate_navigation(path, user, role)
