"""Application entry point and composition root."""

import logging

from entitygrants import __version__
from entitygrants.application.dto.feature_flags import FeatureFlags
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
from entitygrants.application.validation.grant_validator import GrantValidator
from entitygrants.config import Settings, get_settings
from entitygrants.infrastructure.auth.keycloak_provider import KeycloakProvider
from entitygrants.infrastructure.persistence.postgres.connection import create_pool
from entitygrants.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from entitygrants.interfaces.api.app import create_app
from entitygrants.interfaces.api.middleware.auth import AuthMiddleware
from entitygrants.interfaces.api.middleware.cors import CORSMiddleware
from entitygrants.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from entitygrants.interfaces.api.resources.creator_rights import CreatorRightsResource
from entitygrants.interfaces.api.resources.grants import EntityGrantsResource, GrantResource
from entitygrants.interfaces.api.resources.health import HealthResource
from entitygrants.interfaces.api.resources.permissions import EntityPermissionsResource

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )


def create_entity_grants_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)

    pool = create_pool(
        settings.database_url,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)
    flags = FeatureFlags.from_settings(settings)
    validator = GrantValidator()

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("Keycloak client secret not set; all requests will be unauthenticated")

    grant_permission = GrantEntityPermissionUseCase(uow_factory, flags, validator)
    revoke_permission = RevokeEntityPermissionUseCase(uow_factory, flags, validator)
    list_grants = ListEntityGrantsUseCase(uow_factory, flags)
    resolve_permissions = ResolveEntityPermissionsUseCase(uow_factory, flags)
    revoke_creator_rights = RevokeCreatorRightsUseCase(uow_factory, flags, validator)
    restore_creator_rights = RestoreCreatorRightsUseCase(uow_factory, flags, validator)

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    logger.info(
        "Entity grants v%s starting (entity_grants=%s, creator_rights=%s)",
        __version__,
        flags.entity_grants,
        flags.creator_rights,
    )
    return create_app(
        entity_grants_resource=EntityGrantsResource(list_grants, grant_permission),
        grant_resource=GrantResource(revoke_permission),
        entity_permissions_resource=EntityPermissionsResource(resolve_permissions),
        creator_rights_resource=CreatorRightsResource(
            revoke_creator_rights, restore_creator_rights
        ),
        health_resource=HealthResource(pool),
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
        ],
    )


def main() -> None:
    """CLI entry point - run uvicorn server."""
    import uvicorn

    uvicorn.run(create_entity_grants_app(), host="0.0.0.0", port=8000)
