"""Project membership lookup port."""

from typing import Protocol
from uuid import UUID

from entitygrants.domain.value_objects import PermissionRole


class ProjectRepository(Protocol):
    """Read-only view of project membership, owned by the wider application."""

    async def is_project_owner(self, user_id: UUID, project_id: UUID) -> bool: ...

    async def is_project_member(self, user_id: UUID, project_id: UUID) -> bool: ...

    async def get_project_role(self, user_id: UUID, project_id: UUID) -> PermissionRole | None: ...
