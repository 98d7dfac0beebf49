"""PostgreSQL grant repository implementation."""

from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection

from entitygrants.domain.entities import PermissionGrant
from entitygrants.domain.exceptions import GrantConflict, GrantNotFound
from entitygrants.domain.value_objects import EntityType, PermissionRole, SubjectType

_COLUMNS = (
    "id, entity_type, entity_id, subject_type, subject_id, role, "
    "granted_by, granted_at, revoked_at"
)


def _to_grant(r: tuple) -> PermissionGrant:
    return PermissionGrant(
        id=r[0],
        entity_type=EntityType(r[1]),
        entity_id=r[2],
        subject_type=SubjectType(r[3]),
        subject_id=r[4],
        role=PermissionRole(r[5]),
        granted_by=r[6],
        granted_at=r[7],
        revoked_at=r[8],
    )


class PostgresGrantRepository:
    """Grant repository over entity_permission_grant."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, grant_id: UUID) -> PermissionGrant | None:
        """Get grant by id, revoked or not. Locks the row for the transaction."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM entity_permission_grant WHERE id = %s FOR UPDATE",
            (grant_id,),
        )
        r = await cur.fetchone()
        return _to_grant(r) if r else None

    async def find_grant(
        self,
        entity_type: EntityType,
        entity_id: UUID,
        subject_type: SubjectType,
        subject_id: UUID,
    ) -> PermissionGrant | None:
        """Find grant for tuple, preferring the active row, then the latest revoked one."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM entity_permission_grant "
            "WHERE entity_type = %s AND entity_id = %s AND subject_type = %s AND subject_id = %s "
            "ORDER BY (revoked_at IS NULL) DESC, granted_at DESC "
            "LIMIT 1 FOR UPDATE",
            (entity_type.value, entity_id, subject_type.value, subject_id),
        )
        r = await cur.fetchone()
        return _to_grant(r) if r else None

    async def insert_grant(self, grant: PermissionGrant) -> PermissionGrant:
        """Insert grant. Raises GrantConflict if an active grant for the tuple exists."""
        cur = await self._conn.execute(
            f"INSERT INTO entity_permission_grant ({_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s) "
            "ON CONFLICT (entity_type, entity_id, subject_type, subject_id) "
            "WHERE revoked_at IS NULL DO NOTHING "
            "RETURNING id",
            (
                grant.id,
                grant.entity_type.value,
                grant.entity_id,
                grant.subject_type.value,
                grant.subject_id,
                grant.role.value,
                grant.granted_by,
                grant.granted_at,
                grant.revoked_at,
            ),
        )
        if await cur.fetchone() is None:
            raise GrantConflict(
                f"Active grant exists for {grant.subject_type.value} {grant.subject_id} "
                f"on {grant.entity_type.value} {grant.entity_id}"
            )
        return grant

    async def restore_grant(
        self,
        grant_id: UUID,
        granted_by: UUID,
        granted_at: datetime,
        role: PermissionRole,
    ) -> PermissionGrant:
        """Clear revoked_at and refresh audit fields."""
        cur = await self._conn.execute(
            "UPDATE entity_permission_grant "
            "SET revoked_at = NULL, granted_by = %s, granted_at = %s, role = %s "
            f"WHERE id = %s RETURNING {_COLUMNS}",
            (granted_by, granted_at, role.value, grant_id),
        )
        r = await cur.fetchone()
        if not r:
            raise GrantNotFound(grant_id)
        return _to_grant(r)

    async def mark_revoked(self, grant_id: UUID, revoked_at: datetime) -> None:
        """Set revoked_at unless already set."""
        await self._conn.execute(
            "UPDATE entity_permission_grant SET revoked_at = %s "
            "WHERE id = %s AND revoked_at IS NULL",
            (revoked_at, grant_id),
        )

    async def list_grants(self, entity_type: EntityType, entity_id: UUID) -> list[PermissionGrant]:
        """List all grants on entity, active and revoked."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM entity_permission_grant "
            "WHERE entity_type = %s AND entity_id = %s ORDER BY granted_at, id",
            (entity_type.value, entity_id),
        )
        rows = await cur.fetchall()
        return [_to_grant(r) for r in rows]

    async def list_active_for_subjects(
        self,
        entity_type: EntityType,
        entity_id: UUID,
        subject_type: SubjectType,
        subject_ids: list[UUID],
    ) -> list[PermissionGrant]:
        """List active grants on entity for any of the given subjects."""
        if not subject_ids:
            return []
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM entity_permission_grant "
            "WHERE entity_type = %s AND entity_id = %s AND subject_type = %s "
            "AND subject_id = ANY(%s) AND revoked_at IS NULL",
            (entity_type.value, entity_id, subject_type.value, list(subject_ids)),
        )
        rows = await cur.fetchall()
        return [_to_grant(r) for r in rows]
