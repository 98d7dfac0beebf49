"""PostgreSQL creator rights revocation repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from entitygrants.domain.entities import CreatorRightsRevocation
from entitygrants.domain.exceptions import RevocationConflict
from entitygrants.domain.value_objects import EntityType


class PostgresCreatorRevocationRepository:
    """Creator revocation repository over creator_rights_revocation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(
        self, entity_type: EntityType, entity_id: UUID, creator_user_id: UUID
    ) -> CreatorRightsRevocation | None:
        """Get revocation for creator on entity."""
        cur = await self._conn.execute(
            "SELECT id, entity_type, entity_id, creator_user_id, revoked_by, revoked_at "
            "FROM creator_rights_revocation "
            "WHERE entity_type = %s AND entity_id = %s AND creator_user_id = %s",
            (entity_type.value, entity_id, creator_user_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return CreatorRightsRevocation(
            id=r[0],
            entity_type=EntityType(r[1]),
            entity_id=r[2],
            creator_user_id=r[3],
            revoked_by=r[4],
            revoked_at=r[5],
        )

    async def create(self, revocation: CreatorRightsRevocation) -> CreatorRightsRevocation:
        """Create revocation. Raises RevocationConflict if one already exists."""
        cur = await self._conn.execute(
            "INSERT INTO creator_rights_revocation "
            "(id, entity_type, entity_id, creator_user_id, revoked_by, revoked_at) "
            "VALUES (%s, %s, %s, %s, %s, %s) "
            "ON CONFLICT (entity_type, entity_id, creator_user_id) DO NOTHING "
            "RETURNING id",
            (
                revocation.id,
                revocation.entity_type.value,
                revocation.entity_id,
                revocation.creator_user_id,
                revocation.revoked_by,
                revocation.revoked_at,
            ),
        )
        if await cur.fetchone() is None:
            raise RevocationConflict(
                f"Creator rights of {revocation.creator_user_id} on "
                f"{revocation.entity_type.value} {revocation.entity_id} already revoked"
            )
        return revocation

    async def delete(self, revocation_id: UUID) -> None:
        """Delete revocation."""
        await self._conn.execute(
            "DELETE FROM creator_rights_revocation WHERE id = %s",
            (revocation_id,),
        )
