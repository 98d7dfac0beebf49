"""Team group lookup port."""

from typing import Protocol
from uuid import UUID

from entitygrants.domain.entities import GroupStatus


class GroupRepository(Protocol):
    """Read-only view of team groups."""

    async def get_group(self, group_id: UUID) -> GroupStatus: ...

    async def list_group_ids_for_user(self, user_id: UUID) -> list[UUID]: ...
