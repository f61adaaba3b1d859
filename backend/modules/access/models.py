"""
Access grant model.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

from shared.models import AuthenticatedUser
from modules.roles.models import Role


class AccessGrant(BaseModel):
    """
    Proof that a request passed the authorization gate.

    Carries the privileged (service-role) client. Grants are only created
    by AuthorizationGate after its own checks succeed.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    user: AuthenticatedUser
    role: Role
    client: Any

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
