"""Entity to project lookup port."""

from typing import Protocol
from uuid import UUID

from entitygrants.domain.value_objects import EntityType


class EntityRepository(Protocol):
    """Read-only view of tracks and subtracks."""

    async def resolve_project_for_entity(
        self, entity_type: EntityType, entity_id: UUID
    ) -> UUID | None: ...

    async def get_creator(self, entity_type: EntityType, entity_id: UUID) -> UUID | None: ...
