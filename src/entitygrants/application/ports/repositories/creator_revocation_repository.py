"""Creator rights revocation port."""

from typing import Protocol
from uuid import UUID

from entitygrants.domain.entities import CreatorRightsRevocation
from entitygrants.domain.value_objects import EntityType


class CreatorRevocationRepository(Protocol):
    """Port for creator rights revocations."""

    async def get(
        self, entity_type: EntityType, entity_id: UUID, creator_user_id: UUID
    ) -> CreatorRightsRevocation | None: ...

    async def create(self, revocation: CreatorRightsRevocation) -> CreatorRightsRevocation: ...

    async def delete(self, revocation_id: UUID) -> None: ...
