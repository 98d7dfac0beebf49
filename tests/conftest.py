"""Pytest fixtures for entity grants tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, replace
from datetime import datetime
from uuid import UUID, uuid4

import pytest

from entitygrants.application.dto.feature_flags import FeatureFlags
from entitygrants.domain.entities import (
    MISSING_GROUP,
    CreatorRightsRevocation,
    GroupStatus,
    PermissionGrant,
)
from entitygrants.domain.exceptions import GrantConflict, GrantNotFound, RevocationConflict
from entitygrants.domain.value_objects import EntityType, PermissionRole, SubjectType


# --- Fake repositories ---


class FakeGrantRepository:
    """In-memory grant store. Returns copies so callers cannot mutate stored rows."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, PermissionGrant] = {}

    def snapshot(self) -> dict[UUID, PermissionGrant]:
        """Copy of stored rows, for asserting the store is unchanged."""
        return {k: replace(v) for k, v in self._by_id.items()}

    async def get_by_id(self, grant_id: UUID) -> PermissionGrant | None:
        grant = self._by_id.get(grant_id)
        return replace(grant) if grant else None

    async def find_grant(
        self,
        entity_type: EntityType,
        entity_id: UUID,
        subject_type: SubjectType,
        subject_id: UUID,
    ) -> PermissionGrant | None:
        matches = [
            g
            for g in self._by_id.values()
            if g.entity_type == entity_type
            and g.entity_id == entity_id
            and g.subject_type == subject_type
            and g.subject_id == subject_id
        ]
        if not matches:
            return None
        matches.sort(key=lambda g: (g.is_active, g.granted_at), reverse=True)
        return replace(matches[0])

    async def insert_grant(self, grant: PermissionGrant) -> PermissionGrant:
        existing = await self.find_grant(
            grant.entity_type, grant.entity_id, grant.subject_type, grant.subject_id
        )
        if existing and existing.is_active:
            raise GrantConflict("active grant exists")
        self._by_id[grant.id] = replace(grant)
        return grant

    async def restore_grant(
        self,
        grant_id: UUID,
        granted_by: UUID,
        granted_at: datetime,
        role: PermissionRole,
    ) -> PermissionGrant:
        grant = self._by_id.get(grant_id)
        if not grant:
            raise GrantNotFound(grant_id)
        restored = replace(
            grant, revoked_at=None, granted_by=granted_by, granted_at=granted_at, role=role
        )
        self._by_id[grant_id] = restored
        return replace(restored)

    async def mark_revoked(self, grant_id: UUID, revoked_at: datetime) -> None:
        grant = self._by_id.get(grant_id)
        if grant and grant.revoked_at is None:
            self._by_id[grant_id] = replace(grant, revoked_at=revoked_at)

    async def list_grants(self, entity_type: EntityType, entity_id: UUID) -> list[PermissionGrant]:
        items = [
            replace(g)
            for g in self._by_id.values()
            if g.entity_type == entity_type and g.entity_id == entity_id
        ]
        items.sort(key=lambda g: g.granted_at)
        return items

    async def list_active_for_subjects(
        self,
        entity_type: EntityType,
        entity_id: UUID,
        subject_type: SubjectType,
        subject_ids: list[UUID],
    ) -> list[PermissionGrant]:
        return [
            replace(g)
            for g in self._by_id.values()
            if g.entity_type == entity_type
            and g.entity_id == entity_id
            and g.subject_type == subject_type
            and g.subject_id in subject_ids
            and g.is_active
        ]


class FakeCreatorRevocationRepository:
    """In-memory creator rights revocations."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, CreatorRightsRevocation] = {}

    async def get(
        self, entity_type: EntityType, entity_id: UUID, creator_user_id: UUID
    ) -> CreatorRightsRevocation | None:
        for r in self._by_id.values():
            if (
                r.entity_type == entity_type
                and r.entity_id == entity_id
                and r.creator_user_id == creator_user_id
            ):
                return r
        return None

    async def create(self, revocation: CreatorRightsRevocation) -> CreatorRightsRevocation:
        if await self.get(
            revocation.entity_type, revocation.entity_id, revocation.creator_user_id
        ):
            raise RevocationConflict("revocation exists")
        self._by_id[revocation.id] = revocation
        return revocation

    async def delete(self, revocation_id: UUID) -> None:
        self._by_id.pop(revocation_id, None)


class FakeProjectRepository:
    """In-memory project membership."""

    def __init__(self) -> None:
        self._roles: dict[tuple[UUID, UUID], PermissionRole] = {}

    def add_member(self, project_id: UUID, user_id: UUID, role: PermissionRole) -> None:
        """Helper to add project member for tests."""
        self._roles[(user_id, project_id)] = role

    def remove_member(self, project_id: UUID, user_id: UUID) -> None:
        self._roles.pop((user_id, project_id), None)

    async def get_project_role(self, user_id: UUID, project_id: UUID) -> PermissionRole | None:
        return self._roles.get((user_id, project_id))

    async def is_project_owner(self, user_id: UUID, project_id: UUID) -> bool:
        return self._roles.get((user_id, project_id)) is PermissionRole.OWNER

    async def is_project_member(self, user_id: UUID, project_id: UUID) -> bool:
        return (user_id, project_id) in self._roles


class FakeGroupRepository:
    """In-memory team groups."""

    def __init__(self) -> None:
        self._groups: dict[UUID, GroupStatus] = {}
        self._members: dict[UUID, set[UUID]] = {}

    def add_group(self, group_id: UUID, archived: bool = False) -> None:
        self._groups[group_id] = GroupStatus(exists=True, archived=archived)

    def add_member(self, group_id: UUID, user_id: UUID) -> None:
        self._members.setdefault(group_id, set()).add(user_id)

    async def get_group(self, group_id: UUID) -> GroupStatus:
        return self._groups.get(group_id, MISSING_GROUP)

    async def list_group_ids_for_user(self, user_id: UUID) -> list[UUID]:
        return [
            gid
            for gid, members in self._members.items()
            if user_id in members and self._groups.get(gid, MISSING_GROUP).eligible
        ]


class FakeEntityRepository:
    """In-memory tracks and subtracks."""

    def __init__(self) -> None:
        self._tracks: dict[UUID, tuple[UUID, UUID | None]] = {}
        self._subtracks: dict[UUID, tuple[UUID, UUID | None]] = {}

    def add_track(self, track_id: UUID, project_id: UUID, created_by: UUID | None = None) -> None:
        self._tracks[track_id] = (project_id, created_by)

    def add_subtrack(
        self, subtrack_id: UUID, track_id: UUID, created_by: UUID | None = None
    ) -> None:
        self._subtracks[subtrack_id] = (track_id, created_by)

    def remove_track(self, track_id: UUID) -> None:
        self._tracks.pop(track_id, None)

    async def resolve_project_for_entity(
        self, entity_type: EntityType, entity_id: UUID
    ) -> UUID | None:
        if entity_type is EntityType.TRACK:
            track = self._tracks.get(entity_id)
            return track[0] if track else None
        subtrack = self._subtracks.get(entity_id)
        if not subtrack:
            return None
        track = self._tracks.get(subtrack[0])
        return track[0] if track else None

    async def get_creator(self, entity_type: EntityType, entity_id: UUID) -> UUID | None:
        table = self._tracks if entity_type is EntityType.TRACK else self._subtracks
        row = table.get(entity_id)
        return row[1] if row else None


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.grants = FakeGrantRepository()
        self.creator_revocations = FakeCreatorRevocationRepository()
        self.projects = FakeProjectRepository()
        self.groups = FakeGroupRepository()
        self.entities = FakeEntityRepository()
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory that yields the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow
        await uow.commit()

    return _factory


@asynccontextmanager
async def forbidden_uow_factory() -> AsyncIterator[FakeUnitOfWork]:
    """Factory for asserting an operation fails before touching any store."""
    raise AssertionError("store must not be accessed")
    yield


# --- Scenario ---


@dataclass
class World:
    """One project with an owner, members, a track, a subtrack and groups."""

    uow: FakeUnitOfWork
    project_id: UUID
    owner_id: UUID
    member_id: UUID
    editor_member_id: UUID
    outsider_id: UUID
    track_id: UUID
    subtrack_id: UUID
    group_id: UUID
    archived_group_id: UUID


def build_world() -> World:
    uow = FakeUnitOfWork()
    world = World(
        uow=uow,
        project_id=uuid4(),
        owner_id=uuid4(),
        member_id=uuid4(),
        editor_member_id=uuid4(),
        outsider_id=uuid4(),
        track_id=uuid4(),
        subtrack_id=uuid4(),
        group_id=uuid4(),
        archived_group_id=uuid4(),
    )
    uow.projects.add_member(world.project_id, world.owner_id, PermissionRole.OWNER)
    uow.projects.add_member(world.project_id, world.member_id, PermissionRole.VIEWER)
    uow.projects.add_member(world.project_id, world.editor_member_id, PermissionRole.EDITOR)
    uow.entities.add_track(world.track_id, world.project_id, created_by=world.owner_id)
    uow.entities.add_subtrack(world.subtrack_id, world.track_id, created_by=world.member_id)
    uow.groups.add_group(world.group_id)
    uow.groups.add_group(world.archived_group_id, archived=True)
    return world


# --- Fixtures ---


@pytest.fixture
def world() -> World:
    """Fresh in-memory project scenario for each test."""
    return build_world()


@pytest.fixture
def uow_factory(world: World):
    """Factory returning async context manager bound to the world's UoW."""
    return make_uow_factory(world.uow)


@pytest.fixture
def flags() -> FeatureFlags:
    """All features enabled."""
    return FeatureFlags(entity_grants=True, creator_rights=True)


@pytest.fixture
def disabled_flags() -> FeatureFlags:
    return FeatureFlags(entity_grants=False, creator_rights=False)
