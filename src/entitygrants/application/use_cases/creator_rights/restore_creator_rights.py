"""Restore creator rights use case."""

import logging
from uuid import UUID

from entitygrants.application.dto.feature_flags import CREATOR_RIGHTS, FeatureFlags
from entitygrants.application.validation.grant_validator import (
    GrantValidator,
    parse_entity_type,
    parse_uuid,
)
from entitygrants.domain.value_objects import EntityType

logger = logging.getLogger(__name__)


class RestoreCreatorRightsUseCase:
    """Delete a creator rights revocation. No-op when none exists."""

    def __init__(
        self,
        unit_of_work_factory: type,
        feature_flags: FeatureFlags,
        validator: GrantValidator | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._flags = feature_flags
        self._validator = validator or GrantValidator()

    async def execute(
        self,
        entity_type: EntityType | str,
        entity_id: UUID | str,
        creator_user_id: UUID | str,
        restored_by: UUID | str,
    ) -> bool:
        """Returns True when a revocation was removed."""
        self._flags.require(CREATOR_RIGHTS)
        entity_type = parse_entity_type(entity_type)
        entity_id = parse_uuid(entity_id, "entity id")
        creator_user_id = parse_uuid(creator_user_id, "user id")
        restored_by = parse_uuid(restored_by, "user id")

        async with self._uow_factory() as uow:
            await self._validator.require_owner(uow, restored_by, entity_type, entity_id)

            existing = await uow.creator_revocations.get(entity_type, entity_id, creator_user_id)
            if not existing:
                return False
            await uow.creator_revocations.delete(existing.id)
            logger.info(
                "Restored creator rights of %s on %s %s",
                creator_user_id,
                entity_type.value,
                entity_id,
            )
            return True
