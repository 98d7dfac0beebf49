"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from entitygrants.interfaces.api.resources.creator_rights import CreatorRightsResource
from entitygrants.interfaces.api.resources.grants import EntityGrantsResource, GrantResource
from entitygrants.interfaces.api.resources.health import HealthResource
from entitygrants.interfaces.api.resources.permissions import EntityPermissionsResource

logger = logging.getLogger(__name__)


async def handle_unexpected(req, resp, ex, params) -> None:
    """Log and hide unexpected errors."""
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    entity_grants_resource: EntityGrantsResource,
    grant_resource: GrantResource,
    entity_permissions_resource: EntityPermissionsResource,
    creator_rights_resource: CreatorRightsResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/entities/{entity_type}/{entity_id}/grants", entity_grants_resource)
    app.add_route("/v1/grants/{grant_id}", grant_resource)
    app.add_route(
        "/v1/entities/{entity_type}/{entity_id}/permissions",
        entity_permissions_resource,
    )
    app.add_route(
        "/v1/entities/{entity_type}/{entity_id}/creator-rights/{user_id}",
        creator_rights_resource,
    )
    return app
