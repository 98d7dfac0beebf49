"""Grant store port."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from entitygrants.domain.entities import PermissionGrant
from entitygrants.domain.value_objects import EntityType, PermissionRole, SubjectType


class GrantRepository(Protocol):
    """Port for grant persistence. Append and soft-update only, no authorization."""

    async def get_by_id(self, grant_id: UUID) -> PermissionGrant | None: ...

    async def find_grant(
        self,
        entity_type: EntityType,
        entity_id: UUID,
        subject_type: SubjectType,
        subject_id: UUID,
    ) -> PermissionGrant | None: ...

    async def insert_grant(self, grant: PermissionGrant) -> PermissionGrant: ...

    async def restore_grant(
        self, grant_id: UUID, granted_by: UUID, granted_at: datetime, role: PermissionRole
    ) -> PermissionGrant: ...

    async def mark_revoked(self, grant_id: UUID, revoked_at: datetime) -> None: ...

    async def list_grants(self, entity_type: EntityType, entity_id: UUID) -> list[PermissionGrant]: ...

    async def list_active_for_subjects(
        self,
        entity_type: EntityType,
        entity_id: UUID,
        subject_type: SubjectType,
        subject_ids: list[UUID],
    ) -> list[PermissionGrant]: ...
