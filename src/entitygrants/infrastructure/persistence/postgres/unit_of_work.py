"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from entitygrants.infrastructure.persistence.postgres.creator_revocation_repository import (
    PostgresCreatorRevocationRepository,
)
from entitygrants.infrastructure.persistence.postgres.entity_repository import (
    PostgresEntityRepository,
)
from entitygrants.infrastructure.persistence.postgres.grant_repository import (
    PostgresGrantRepository,
)
from entitygrants.infrastructure.persistence.postgres.group_repository import (
    PostgresGroupRepository,
)
from entitygrants.infrastructure.persistence.postgres.project_repository import (
    PostgresProjectRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._grants = PostgresGrantRepository(self._conn)
        self._creator_revocations = PostgresCreatorRevocationRepository(self._conn)
        self._projects = PostgresProjectRepository(self._conn)
        self._groups = PostgresGroupRepository(self._conn)
        self._entities = PostgresEntityRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def grants(self) -> PostgresGrantRepository:
        return self._grants

    @property
    def creator_revocations(self) -> PostgresCreatorRevocationRepository:
        return self._creator_revocations

    @property
    def projects(self) -> PostgresProjectRepository:
        return self._projects

    @property
    def groups(self) -> PostgresGroupRepository:
        return self._groups

    @property
    def entities(self) -> PostgresEntityRepository:
        return self._entities

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
