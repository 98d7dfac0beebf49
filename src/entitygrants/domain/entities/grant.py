"""Permission grant entity - subject has role on a track or subtrack."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from entitygrants.domain.value_objects import EntityType, PermissionRole, SubjectType


@dataclass
class PermissionGrant:
    """Entity-level grant. Soft-revoked via revoked_at, never deleted."""

    id: UUID
    entity_type: EntityType
    entity_id: UUID
    subject_type: SubjectType
    subject_id: UUID
    role: PermissionRole
    granted_by: UUID
    granted_at: datetime
    revoked_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        return self.revoked_at is None

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "entity_type": self.entity_type.value,
            "entity_id": str(self.entity_id),
            "subject_type": self.subject_type.value,
            "subject_id": str(self.subject_id),
            "role": self.role.value,
            "granted_by": str(self.granted_by),
            "granted_at": self.granted_at.isoformat(),
            "revoked_at": self.revoked_at.isoformat() if self.revoked_at else None,
        }
