"""API services package."""

from .factories import (
    get_admin_request_service,
    get_admin_review_service,
    get_profile_admin_service,
    get_self_profile_service,
    get_group_service,
    get_member_group_service,
)

__all__ = [
    "get_admin_request_service",
    "get_admin_review_service",
    "get_profile_admin_service",
    "get_self_profile_service",
    "get_group_service",
    "get_member_group_service",
]
