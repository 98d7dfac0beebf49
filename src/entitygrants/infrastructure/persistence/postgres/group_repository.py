"""PostgreSQL team group lookups."""

from uuid import UUID

from psycopg import AsyncConnection

from entitygrants.domain.entities import MISSING_GROUP, GroupStatus


class PostgresGroupRepository:
    """Reads team_groups and team_group_members."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_group(self, group_id: UUID) -> GroupStatus:
        """Get group existence and archive state."""
        cur = await self._conn.execute(
            "SELECT archived_at FROM team_groups WHERE id = %s",
            (group_id,),
        )
        r = await cur.fetchone()
        if not r:
            return MISSING_GROUP
        return GroupStatus(exists=True, archived=r[0] is not None)

    async def list_group_ids_for_user(self, user_id: UUID) -> list[UUID]:
        """List ids of unarchived groups the user belongs to."""
        cur = await self._conn.execute(
            "SELECT m.group_id FROM team_group_members m "
            "JOIN team_groups g ON g.id = m.group_id "
            "WHERE m.user_id = %s AND g.archived_at IS NULL",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [r[0] for r in rows]
