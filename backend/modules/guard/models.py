"""
Route guard models.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from modules.roles.models import Role


class GuardState(str, Enum):
    """Lifecycle of a single guarded navigation."""

    LOADING = "loading"
    AUTHORIZED = "authorized"
    REDIRECTING = "redirecting"


class RouteRequirement(BaseModel):
    """What a guarded route demands of the visitor."""

    model_config = {"frozen": True}

    require_auth: bool = True
    require_admin: bool = False
    student_only: bool = Field(default=False, description="Admins are sent to their own landing page")


class GuardDecision(BaseModel):
    """Outcome of evaluating a navigation."""

    state: GuardState
    path: str
    redirect_to: Optional[str] = None
    role: Optional[Role] = None
