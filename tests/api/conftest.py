"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from entitygrants.application.use_cases.creator_rights.restore_creator_rights import (
    RestoreCreatorRightsUseCase,
)
from entitygrants.application.use_cases.creator_rights.revoke_creator_rights import (
    RevokeCreatorRightsUseCase,
)
from entitygrants.application.use_cases.grants.grant_permission import (
    GrantEntityPermissionUseCase,
)
from entitygrants.application.use_cases.grants.list_grants import ListEntityGrantsUseCase
from entitygrants.application.use_cases.grants.revoke_permission import (
    RevokeEntityPermissionUseCase,
)
from entitygrants.application.use_cases.resolve.resolve_permissions import (
    ResolveEntityPermissionsUseCase,
)
from entitygrants.interfaces.api.app import create_app
from entitygrants.interfaces.api.middleware.auth import RequestUser
from entitygrants.interfaces.api.resources.creator_rights import CreatorRightsResource
from entitygrants.interfaces.api.resources.grants import EntityGrantsResource, GrantResource
from entitygrants.interfaces.api.resources.health import HealthResource
from entitygrants.interfaces.api.resources.permissions import EntityPermissionsResource


class AuthBypassMiddleware:
    """Middleware that takes the acting user from X-Test-User for testing."""

    async def process_request(self, req, resp):
        user_id = req.get_header("X-Test-User")
        req.context.user = RequestUser(user_id=user_id) if user_id else None


def build_app(uow_factory, flags):
    return create_app(
        entity_grants_resource=EntityGrantsResource(
            ListEntityGrantsUseCase(uow_factory, flags),
            GrantEntityPermissionUseCase(uow_factory, flags),
        ),
        grant_resource=GrantResource(RevokeEntityPermissionUseCase(uow_factory, flags)),
        entity_permissions_resource=EntityPermissionsResource(
            ResolveEntityPermissionsUseCase(uow_factory, flags)
        ),
        creator_rights_resource=CreatorRightsResource(
            RevokeCreatorRightsUseCase(uow_factory, flags),
            RestoreCreatorRightsUseCase(uow_factory, flags),
        ),
        health_resource=HealthResource(),
        middleware=[AuthBypassMiddleware()],
    )


@pytest.fixture
def client(uow_factory, flags) -> TestClient:
    """Falcon ASGI test client with all features enabled."""
    return TestClient(build_app(uow_factory, flags))


@pytest.fixture
def disabled_client(uow_factory, disabled_flags) -> TestClient:
    return TestClient(build_app(uow_factory, disabled_flags))
