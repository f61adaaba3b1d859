"""
Roles module.

Owns the profiles table, the Role enum and the RoleResolver that every
route guard and API gate consults.

Public API:
- Role, Profile: data models
- IRoleResolver, IProfileRepository: interfaces
- RoleResolver: seeded-admin override, profile lookup, student fallback
- ProfileService: current-user lookup, lazy profile creation, role edits
"""

from .interfaces import IProfileRepository, IRoleResolver
from .models import Profile, Role, UpdateRoleRequest, EnsureProfileRequest
from .exceptions import ProfileNotFoundError, ForbiddenError

__all__ = [
    # Interfaces
    "IProfileRepository",
    "IRoleResolver",
    # Models
    "Profile",
    "Role",
    "UpdateRoleRequest",
    "EnsureProfileRequest",
    # Exceptions
    "ProfileNotFoundError",
    "ForbiddenError",
]
