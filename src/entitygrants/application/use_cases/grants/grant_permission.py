"""Grant entity permission use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from entitygrants.application.dto.feature_flags import ENTITY_GRANTS, FeatureFlags
from entitygrants.application.validation.grant_validator import (
    GrantValidator,
    parse_entity_type,
    parse_subject_type,
    parse_uuid,
)
from entitygrants.domain.entities import PermissionGrant
from entitygrants.domain.exceptions import GrantConflict
from entitygrants.domain.value_objects import EntityType, PermissionRole, SubjectType

logger = logging.getLogger(__name__)


class GrantEntityPermissionUseCase:
    """Grant a user or group a role on a track or subtrack.

    Idempotent per (entity, subject): an active grant is returned unchanged,
    a revoked one is restored in place, otherwise a new row is inserted.
    """

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
        subject_type: SubjectType | str,
        subject_id: UUID | str,
        role: PermissionRole | str,
        granted_by: UUID | str,
    ) -> PermissionGrant:
        """Grant role to subject on entity. granted_by must own the entity's project."""
        self._flags.require(ENTITY_GRANTS)

        parsed_role = self._validator.check_role(role)
        entity_type = parse_entity_type(entity_type)
        subject_type = parse_subject_type(subject_type)
        entity_id = parse_uuid(entity_id, "entity id")
        subject_id = parse_uuid(subject_id, "subject id")
        granted_by = parse_uuid(granted_by, "user id")

        async with self._uow_factory() as uow:
            await self._validator.validate_grant(
                uow, granted_by, entity_type, entity_id, subject_type, subject_id
            )

            existing = await uow.grants.find_grant(
                entity_type, entity_id, subject_type, subject_id
            )
            now = datetime.now(UTC)
            if existing and existing.is_active:
                return existing
            if existing:
                restored = await uow.grants.restore_grant(
                    existing.id, granted_by, now, parsed_role
                )
                logger.info(
                    "Restored grant %s: %s %s on %s %s as %s",
                    restored.id,
                    subject_type.value,
                    subject_id,
                    entity_type.value,
                    entity_id,
                    parsed_role.value,
                )
                return restored

            grant = PermissionGrant(
                id=uuid4(),
                entity_type=entity_type,
                entity_id=entity_id,
                subject_type=subject_type,
                subject_id=subject_id,
                role=parsed_role,
                granted_by=granted_by,
                granted_at=now,
            )
            try:
                await uow.grants.insert_grant(grant)
            except GrantConflict:
                # Lost the race to a concurrent grant of the same tuple.
                winner = await uow.grants.find_grant(
                    entity_type, entity_id, subject_type, subject_id
                )
                if winner is None:
                    raise
                return winner

            logger.info(
                "Created grant %s: %s %s on %s %s as %s",
                grant.id,
                subject_type.value,
                subject_id,
                entity_type.value,
                entity_id,
                parsed_role.value,
            )
            return grant
