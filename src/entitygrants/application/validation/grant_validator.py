"""Grant validation - decides whether a grant or revoke may proceed.

Read-only: every check goes through the repositories of the caller's
Unit of Work and nothing is written. Failures raise the specific domain
error so the caller can surface it verbatim.
"""

import logging
from enum import StrEnum
from uuid import UUID

from entitygrants.application.ports import UnitOfWork
from entitygrants.domain.exceptions import (
    EntityNotFound,
    InvalidRole,
    NotProjectOwner,
    SubjectNotEligible,
    ValidationError,
)
from entitygrants.domain.value_objects import EntityType, PermissionRole, SubjectType

logger = logging.getLogger(__name__)


def _coerce(enum_cls: type[StrEnum], value: StrEnum | str, label: str):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"Invalid {label} '{value}', expected one of: {allowed}") from None


def parse_entity_type(value: EntityType | str) -> EntityType:
    return _coerce(EntityType, value, "entity type")


def parse_subject_type(value: SubjectType | str) -> SubjectType:
    return _coerce(SubjectType, value, "subject type")


def parse_uuid(value: UUID | str, label: str) -> UUID:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        raise ValidationError(f"Invalid {label} '{value}'") from None


class GrantValidator:
    """Actor authority, subject eligibility and role checks for entity grants."""

    def check_role(self, role: PermissionRole | str) -> PermissionRole:
        """Return the grantable role or raise InvalidRole. Touches no store."""
        try:
            parsed = PermissionRole(role)
        except ValueError:
            raise InvalidRole(f"Unknown role '{role}'") from None
        if not parsed.grantable:
            raise InvalidRole("Ownership cannot be granted at entity level")
        return parsed

    async def resolve_project(
        self, uow: UnitOfWork, entity_type: EntityType, entity_id: UUID
    ) -> UUID:
        project_id = await uow.entities.resolve_project_for_entity(entity_type, entity_id)
        if project_id is None:
            raise EntityNotFound(entity_type.value, entity_id)
        return project_id

    async def require_owner(
        self,
        uow: UnitOfWork,
        actor_id: UUID,
        entity_type: EntityType,
        entity_id: UUID,
    ) -> UUID:
        """Resolve the entity's project and check actor owns it. Returns project id."""
        project_id = await self.resolve_project(uow, entity_type, entity_id)
        if not await uow.projects.is_project_owner(actor_id, project_id):
            logger.warning(
                "User %s is not owner of project %s (%s %s)",
                actor_id,
                project_id,
                entity_type.value,
                entity_id,
            )
            raise NotProjectOwner("User is not the owner of the entity's project")
        return project_id

    async def check_subject(
        self,
        uow: UnitOfWork,
        project_id: UUID,
        subject_type: SubjectType,
        subject_id: UUID,
    ) -> None:
        if subject_type is SubjectType.USER:
            if not await uow.projects.is_project_member(subject_id, project_id):
                raise SubjectNotEligible(
                    f"User {subject_id} is not a member of project {project_id}"
                )
            return

        # Team membership of the group is left to the resolver's ceiling.
        group = await uow.groups.get_group(subject_id)
        if not group.exists:
            raise SubjectNotEligible(f"Group {subject_id} does not exist")
        if group.archived:
            raise SubjectNotEligible(f"Group {subject_id} is archived")

    async def validate_grant(
        self,
        uow: UnitOfWork,
        actor_id: UUID,
        entity_type: EntityType,
        entity_id: UUID,
        subject_type: SubjectType,
        subject_id: UUID,
    ) -> UUID:
        """Run the store-backed grant checks. Returns the entity's project id.

        The role is checked beforehand with check_role, which needs no store.
        """
        project_id = await self.require_owner(uow, actor_id, entity_type, entity_id)
        await self.check_subject(uow, project_id, subject_type, subject_id)
        return project_id
