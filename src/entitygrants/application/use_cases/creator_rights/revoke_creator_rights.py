"""Revoke creator rights use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from entitygrants.application.dto.feature_flags import CREATOR_RIGHTS, FeatureFlags
from entitygrants.application.validation.grant_validator import (
    GrantValidator,
    parse_entity_type,
    parse_uuid,
)
from entitygrants.domain.entities import CreatorRightsRevocation
from entitygrants.domain.exceptions import RevocationConflict
from entitygrants.domain.value_objects import EntityType

logger = logging.getLogger(__name__)


class RevokeCreatorRightsUseCase:
    """Remove the default editor rights an entity's creator receives."""

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
        revoked_by: UUID | str,
    ) -> CreatorRightsRevocation:
        """Record revocation. Existing revocation is returned unchanged."""
        self._flags.require(CREATOR_RIGHTS)
        entity_type = parse_entity_type(entity_type)
        entity_id = parse_uuid(entity_id, "entity id")
        creator_user_id = parse_uuid(creator_user_id, "user id")
        revoked_by = parse_uuid(revoked_by, "user id")

        async with self._uow_factory() as uow:
            await self._validator.require_owner(uow, revoked_by, entity_type, entity_id)

            existing = await uow.creator_revocations.get(entity_type, entity_id, creator_user_id)
            if existing:
                return existing

            revocation = CreatorRightsRevocation(
                id=uuid4(),
                entity_type=entity_type,
                entity_id=entity_id,
                creator_user_id=creator_user_id,
                revoked_by=revoked_by,
                revoked_at=datetime.now(UTC),
            )
            try:
                await uow.creator_revocations.create(revocation)
            except RevocationConflict:
                # Lost the race to a concurrent revocation of the same creator.
                winner = await uow.creator_revocations.get(
                    entity_type, entity_id, creator_user_id
                )
                if winner is None:
                    raise
                return winner

            logger.info(
                "Revoked creator rights of %s on %s %s",
                creator_user_id,
                entity_type.value,
                entity_id,
            )
            return revocation
