"""
Access module.

The API authorization gate: the only path to the service-role client.
"""

from .gate import AuthorizationGate
from .models import AccessGrant

__all__ = ["AuthorizationGate", "AccessGrant"]
