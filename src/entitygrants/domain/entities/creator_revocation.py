"""Creator rights revocation - presence of a row removes the creator's default rights."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from entitygrants.domain.value_objects import EntityType


@dataclass
class CreatorRightsRevocation:
    """Revocation of creator default rights on one entity."""

    id: UUID
    entity_type: EntityType
    entity_id: UUID
    creator_user_id: UUID
    revoked_by: UUID
    revoked_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "entity_type": self.entity_type.value,
            "entity_id": str(self.entity_id),
            "creator_user_id": str(self.creator_user_id),
            "revoked_by": str(self.revoked_by),
            "revoked_at": self.revoked_at.isoformat(),
        }
