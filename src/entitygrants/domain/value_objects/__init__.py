"""Domain value objects."""

from entitygrants.domain.value_objects.entity_type import EntityType
from entitygrants.domain.value_objects.permission_role import (
    GRANTABLE_ROLES,
    PermissionRole,
    cap_role,
    max_role,
)
from entitygrants.domain.value_objects.subject_type import SubjectType

__all__ = [
    "GRANTABLE_ROLES",
    "EntityType",
    "PermissionRole",
    "SubjectType",
    "cap_role",
    "max_role",
]
