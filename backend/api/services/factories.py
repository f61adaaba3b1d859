"""
Per-request service construction.

Services that touch the store with the service-role client are built from
an AccessGrant, so they can only exist after the gate has passed. Services
that only touch the caller's own rows use the caller's token instead.
"""

from fastapi import Depends

from shared.database import get_supabase_user_client
from modules.access.models import AccessGrant
from modules.admin_requests.repository import AdminRequestRepository
from modules.admin_requests.service import AdminRequestService
from modules.groups.repository import GroupRepository
from modules.groups.service import GroupService
from modules.roles.repository import ProfileRepository
from modules.roles.resolver import RoleResolver
from modules.roles.service import ProfileService

from ..middleware.auth import (
    get_bearer_token,
    get_current_user,
    require_admin,
    require_group_member,
    require_user,
)


def _resolver_for(client) -> RoleResolver:
    return RoleResolver(ProfileRepository(client))


def _admin_request_service(grant: AccessGrant) -> AdminRequestService:
    return AdminRequestService(
        requests=AdminRequestRepository(grant.client),
        profiles=ProfileRepository(grant.client),
        resolver=_resolver_for(grant.client),
    )


def get_admin_request_service(
    grant: AccessGrant = Depends(require_user),
) -> AdminRequestService:
    """Lifecycle service for submitting and listing."""
    return _admin_request_service(grant)


def get_admin_review_service(
    grant: AccessGrant = Depends(require_admin),
) -> AdminRequestService:
    """Lifecycle service for decisions; only built for admins."""
    return _admin_request_service(grant)


def get_profile_admin_service(
    grant: AccessGrant = Depends(require_admin),
) -> ProfileService:
    """Profile service for admin role edits."""
    return ProfileService(ProfileRepository(grant.client), _resolver_for(grant.client))


def get_self_profile_service(
    token: str = Depends(get_bearer_token),
    _user=Depends(get_current_user),
) -> ProfileService:
    """Profile service running as the caller under Row Level Security."""
    client = get_supabase_user_client(token)
    return ProfileService(ProfileRepository(client), _resolver_for(client))


def get_group_service(
    grant: AccessGrant = Depends(require_user),
) -> GroupService:
    """Group service for any authenticated user (joining)."""
    return GroupService(GroupRepository(grant.client))


def get_member_group_service(
    grant: AccessGrant = Depends(require_group_member),
) -> GroupService:
    """Group service for members of the group in the path."""
    return GroupService(GroupRepository(grant.client))
