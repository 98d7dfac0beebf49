"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from entitygrants.application.ports.repositories.creator_revocation_repository import (
    CreatorRevocationRepository,
)
from entitygrants.application.ports.repositories.entity_repository import EntityRepository
from entitygrants.application.ports.repositories.grant_repository import GrantRepository
from entitygrants.application.ports.repositories.group_repository import GroupRepository
from entitygrants.application.ports.repositories.project_repository import (
    ProjectRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def grants(self) -> GrantRepository: ...

    @property
    def creator_revocations(self) -> CreatorRevocationRepository: ...

    @property
    def projects(self) -> ProjectRepository: ...

    @property
    def groups(self) -> GroupRepository: ...

    @property
    def entities(self) -> EntityRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
