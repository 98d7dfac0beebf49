"""List entity grants use case."""

from uuid import UUID

from entitygrants.application.dto.feature_flags import ENTITY_GRANTS, FeatureFlags
from entitygrants.application.validation.grant_validator import parse_entity_type, parse_uuid
from entitygrants.domain.entities import PermissionGrant
from entitygrants.domain.value_objects import EntityType


class ListEntityGrantsUseCase:
    """All grants on an entity, active and revoked."""

    def __init__(self, unit_of_work_factory: type, feature_flags: FeatureFlags) -> None:
        self._uow_factory = unit_of_work_factory
        self._flags = feature_flags

    async def execute(
        self, entity_type: EntityType | str, entity_id: UUID | str
    ) -> list[PermissionGrant]:
        self._flags.require(ENTITY_GRANTS)
        entity_type = parse_entity_type(entity_type)
        entity_id = parse_uuid(entity_id, "entity id")

        async with self._uow_factory() as uow:
            return await uow.grants.list_grants(entity_type, entity_id)
