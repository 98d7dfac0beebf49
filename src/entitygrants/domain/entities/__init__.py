"""Domain entities."""

from entitygrants.domain.entities.creator_revocation import CreatorRightsRevocation
from entitygrants.domain.entities.grant import PermissionGrant
from entitygrants.domain.entities.group import MISSING_GROUP, GroupStatus
from entitygrants.domain.entities.resolved_permissions import (
    CreatorSource,
    GrantSource,
    GroupRole,
    PermissionSource,
    ResolvedPermissions,
)

__all__ = [
    "MISSING_GROUP",
    "CreatorRightsRevocation",
    "CreatorSource",
    "GrantSource",
    "GroupRole",
    "GroupStatus",
    "PermissionGrant",
    "PermissionSource",
    "ResolvedPermissions",
]
