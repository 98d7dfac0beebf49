"""Unit tests for PostgresCreatorRevocationRepository against a mocked connection."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from entitygrants.domain.entities import CreatorRightsRevocation
from entitygrants.domain.exceptions import RevocationConflict
from entitygrants.domain.value_objects import EntityType
from entitygrants.infrastructure.persistence.postgres.creator_revocation_repository import (
    PostgresCreatorRevocationRepository,
)


def _conn(fetchone=None):
    cur = MagicMock()
    cur.fetchone = AsyncMock(return_value=fetchone)
    conn = MagicMock()
    conn.execute = AsyncMock(return_value=cur)
    return conn


def _revocation() -> CreatorRightsRevocation:
    return CreatorRightsRevocation(
        id=uuid4(),
        entity_type=EntityType.SUBTRACK,
        entity_id=uuid4(),
        creator_user_id=uuid4(),
        revoked_by=uuid4(),
        revoked_at=datetime.now(UTC),
    )


@pytest.mark.asyncio
async def test_create_returns_written_row() -> None:
    revocation = _revocation()
    conn = _conn(fetchone=(revocation.id,))

    result = await PostgresCreatorRevocationRepository(conn).create(revocation)

    assert result is revocation
    sql, params = conn.execute.call_args.args
    assert "DO NOTHING RETURNING id" in sql
    assert params[1] == "subtrack"


@pytest.mark.asyncio
async def test_create_conflict_raises() -> None:
    conn = _conn(fetchone=None)

    with pytest.raises(RevocationConflict):
        await PostgresCreatorRevocationRepository(conn).create(_revocation())
