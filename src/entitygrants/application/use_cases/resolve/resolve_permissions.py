"""Resolve effective entity permissions for a user.

Resolution order:
1. project membership (gate)
2. project role (ceiling)
3. creator rights, when enabled
4. active entity grants to the user or any of their groups, when enabled
5. final role = max of the above, capped at the project role

Read-only. Grants are consumed from the grant store and never written.
"""

from uuid import UUID

from entitygrants.application.dto.feature_flags import FeatureFlags
from entitygrants.application.ports import UnitOfWork
from entitygrants.application.validation.grant_validator import parse_entity_type, parse_uuid
from entitygrants.domain.entities import (
    CreatorSource,
    GrantSource,
    GroupRole,
    PermissionSource,
    ResolvedPermissions,
)
from entitygrants.domain.value_objects import (
    EntityType,
    PermissionRole,
    SubjectType,
    cap_role,
    max_role,
)

CREATOR_DEFAULT_ROLE = PermissionRole.EDITOR


class ResolveEntityPermissionsUseCase:
    """Compute a user's effective role on a track or subtrack."""

    def __init__(self, unit_of_work_factory: type, feature_flags: FeatureFlags) -> None:
        self._uow_factory = unit_of_work_factory
        self._flags = feature_flags

    async def execute(
        self,
        user_id: UUID | str,
        entity_type: EntityType | str,
        entity_id: UUID | str,
    ) -> ResolvedPermissions:
        user_id = parse_uuid(user_id, "user id")
        entity_type = parse_entity_type(entity_type)
        entity_id = parse_uuid(entity_id, "entity id")

        async with self._uow_factory() as uow:
            project_id = await uow.entities.resolve_project_for_entity(entity_type, entity_id)
            if project_id is None:
                return ResolvedPermissions.for_role(None)

            project_role = await uow.projects.get_project_role(user_id, project_id)
            source = PermissionSource(project_id=project_id, project_role=project_role)
            if project_role is None:
                return ResolvedPermissions.for_role(None, source)

            creator_role = None
            if self._flags.creator_rights:
                source.creator = await self._creator_source(uow, user_id, entity_type, entity_id)
                creator_role = source.creator.would_grant_role

            grant_role = None
            if self._flags.entity_grants:
                source.grants = await self._grant_source(uow, user_id, entity_type, entity_id)
                grant_role = source.grants.highest_grant_role

        uncapped = max_role([project_role, creator_role, grant_role])
        final_role = cap_role(uncapped, project_role)
        source.ceiling_applied = uncapped is not None and uncapped.exceeds(project_role)
        return ResolvedPermissions.for_role(final_role, source)

    async def _creator_source(
        self,
        uow: UnitOfWork,
        user_id: UUID,
        entity_type: EntityType,
        entity_id: UUID,
    ) -> CreatorSource:
        creator_id = await uow.entities.get_creator(entity_type, entity_id)
        if creator_id != user_id:
            return CreatorSource(is_creator=False, revoked=False, would_grant_role=None)
        revocation = await uow.creator_revocations.get(entity_type, entity_id, user_id)
        revoked = revocation is not None
        return CreatorSource(
            is_creator=True,
            revoked=revoked,
            would_grant_role=None if revoked else CREATOR_DEFAULT_ROLE,
        )

    async def _grant_source(
        self,
        uow: UnitOfWork,
        user_id: UUID,
        entity_type: EntityType,
        entity_id: UUID,
    ) -> GrantSource:
        direct = await uow.grants.list_active_for_subjects(
            entity_type, entity_id, SubjectType.USER, [user_id]
        )
        direct_role = max_role([g.role for g in direct])

        group_roles: list[GroupRole] = []
        group_ids = await uow.groups.list_group_ids_for_user(user_id)
        if group_ids:
            group_grants = await uow.grants.list_active_for_subjects(
                entity_type, entity_id, SubjectType.GROUP, group_ids
            )
            group_roles = [GroupRole(group_id=g.subject_id, role=g.role) for g in group_grants]

        return GrantSource(
            direct_user_role=direct_role,
            group_roles=group_roles,
            highest_grant_role=max_role([direct_role, *(g.role for g in group_roles)]),
        )
