"""PostgreSQL project membership lookups."""

from uuid import UUID

from psycopg import AsyncConnection

from entitygrants.domain.value_objects import PermissionRole


class PostgresProjectRepository:
    """Reads project_users. Archived memberships count as no membership."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_project_role(self, user_id: UUID, project_id: UUID) -> PermissionRole | None:
        """Get user's active role in project."""
        cur = await self._conn.execute(
            "SELECT role FROM project_users "
            "WHERE user_id = %s AND master_project_id = %s AND archived_at IS NULL",
            (user_id, project_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        try:
            return PermissionRole(r[0])
        except ValueError:
            return None

    async def is_project_owner(self, user_id: UUID, project_id: UUID) -> bool:
        return await self.get_project_role(user_id, project_id) is PermissionRole.OWNER

    async def is_project_member(self, user_id: UUID, project_id: UUID) -> bool:
        cur = await self._conn.execute(
            "SELECT 1 FROM project_users "
            "WHERE user_id = %s AND master_project_id = %s AND archived_at IS NULL",
            (user_id, project_id),
        )
        return await cur.fetchone() is not None
