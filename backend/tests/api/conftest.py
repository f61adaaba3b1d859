"""
API test fixtures.

Builds an application whose gate validates real test tokens but reads
profiles, requests and groups from in-memory repositories. Service
overrides keep their gate dependency, so 401/403 paths stay exercised.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi import Depends
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_gate
from api.middleware.auth import get_current_user, require_admin, require_group_member, require_user
from api.services import (
    get_admin_request_service,
    get_admin_review_service,
    get_group_service,
    get_member_group_service,
    get_profile_admin_service,
    get_self_profile_service,
)
from modules.access.gate import AuthorizationGate
from modules.admin_requests.service import AdminRequestService
from modules.auth.service import AuthService
from modules.groups.service import GroupService
from modules.roles.resolver import RoleResolver
from modules.roles.service import ProfileService
from tests.conftest import SEEDED_ADMIN_EMAIL, TEST_JWT_SECRET
from tests.fakes import FakeAdminRequestRepository, FakeGroupRepository, FakeProfileRepository


@pytest.fixture
def store():
    """In-memory tables shared by every dependency of one test app."""
    return SimpleNamespace(
        profiles=FakeProfileRepository(),
        requests=FakeAdminRequestRepository(),
        groups=FakeGroupRepository(),
        service_client=MagicMock(name="service-client"),
        user_client=MagicMock(name="user-client"),
    )


@pytest.fixture
def app(store):
    app = create_app()
    store.client_factory = MagicMock(return_value=store.service_client)
    gate = AuthorizationGate(
        auth=AuthService(jwt_secret=TEST_JWT_SECRET),
        client_factory=store.client_factory,
        user_client_factory=lambda token: store.user_client,
        seeded_admin_email=SEEDED_ADMIN_EMAIL,
        profiles_factory=lambda client: store.profiles,
        groups_factory=lambda client: store.groups,
    )
    resolver = RoleResolver(store.profiles, seeded_admin_email=SEEDED_ADMIN_EMAIL)

    def admin_request_service(grant=Depends(require_user)):
        return AdminRequestService(store.requests, store.profiles, resolver)

    def admin_review_service(grant=Depends(require_admin)):
        return AdminRequestService(store.requests, store.profiles, resolver)

    def profile_admin_service(grant=Depends(require_admin)):
        return ProfileService(store.profiles, resolver)

    def self_profile_service(user=Depends(get_current_user)):
        return ProfileService(store.profiles, resolver)

    def group_service(grant=Depends(require_user)):
        return GroupService(store.groups)

    def member_group_service(grant=Depends(require_group_member)):
        return GroupService(store.groups)

    app.dependency_overrides[get_gate] = lambda: gate
    app.dependency_overrides[get_admin_request_service] = admin_request_service
    app.dependency_overrides[get_admin_review_service] = admin_review_service
    app.dependency_overrides[get_profile_admin_service] = profile_admin_service
    app.dependency_overrides[get_self_profile_service] = self_profile_service
    app.dependency_overrides[get_group_service] = group_service
    app.dependency_overrides[get_member_group_service] = member_group_service
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
