"""Revoke entity permission use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from entitygrants.application.dto.feature_flags import ENTITY_GRANTS, FeatureFlags
from entitygrants.application.validation.grant_validator import GrantValidator, parse_uuid
from entitygrants.domain.entities import PermissionGrant
from entitygrants.domain.exceptions import GrantNotFound

logger = logging.getLogger(__name__)


class RevokeEntityPermissionUseCase:
    """Soft-revoke a grant. Revoking an already revoked grant is a no-op."""

    def __init__(
        self,
        unit_of_work_factory: type,
        feature_flags: FeatureFlags,
        validator: GrantValidator | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._flags = feature_flags
        self._validator = validator or GrantValidator()

    async def execute(self, grant_id: UUID | str, revoked_by: UUID | str) -> PermissionGrant:
        """Revoke grant. revoked_by must own the project of the grant's entity."""
        self._flags.require(ENTITY_GRANTS)
        grant_id = parse_uuid(grant_id, "grant id")
        revoked_by = parse_uuid(revoked_by, "user id")

        async with self._uow_factory() as uow:
            grant = await uow.grants.get_by_id(grant_id)
            if grant is None:
                raise GrantNotFound(grant_id)

            await self._validator.require_owner(
                uow, revoked_by, grant.entity_type, grant.entity_id
            )

            if not grant.is_active:
                return grant

            revoked_at = datetime.now(UTC)
            await uow.grants.mark_revoked(grant.id, revoked_at)
            grant.revoked_at = revoked_at
            logger.info("Revoked grant %s by %s", grant.id, revoked_by)
            return grant
