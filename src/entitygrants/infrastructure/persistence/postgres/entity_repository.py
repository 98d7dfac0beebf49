"""PostgreSQL track and subtrack lookups."""

from uuid import UUID

from psycopg import AsyncConnection

from entitygrants.domain.value_objects import EntityType


class PostgresEntityRepository:
    """Reads guardrails_tracks and guardrails_subtracks."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def resolve_project_for_entity(
        self, entity_type: EntityType, entity_id: UUID
    ) -> UUID | None:
        """Get owning project id. Subtracks resolve through their track."""
        if entity_type is EntityType.TRACK:
            cur = await self._conn.execute(
                "SELECT master_project_id FROM guardrails_tracks WHERE id = %s",
                (entity_id,),
            )
        else:
            cur = await self._conn.execute(
                "SELECT t.master_project_id FROM guardrails_subtracks s "
                "JOIN guardrails_tracks t ON t.id = s.track_id WHERE s.id = %s",
                (entity_id,),
            )
        r = await cur.fetchone()
        return r[0] if r else None

    async def get_creator(self, entity_type: EntityType, entity_id: UUID) -> UUID | None:
        table = "guardrails_tracks" if entity_type is EntityType.TRACK else "guardrails_subtracks"
        cur = await self._conn.execute(
            f"SELECT created_by FROM {table} WHERE id = %s",
            (entity_id,),
        )
        r = await cur.fetchone()
        return r[0] if r else None
