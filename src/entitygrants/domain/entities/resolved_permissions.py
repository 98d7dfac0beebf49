"""Effective permission computed by the resolver."""

from dataclasses import dataclass, field
from uuid import UUID

from entitygrants.domain.value_objects import PermissionRole


@dataclass
class CreatorSource:
    is_creator: bool
    revoked: bool
    would_grant_role: PermissionRole | None


@dataclass
class GroupRole:
    group_id: UUID
    role: PermissionRole


@dataclass
class GrantSource:
    direct_user_role: PermissionRole | None
    group_roles: list[GroupRole] = field(default_factory=list)
    highest_grant_role: PermissionRole | None = None


@dataclass
class PermissionSource:
    """How the final role was reached."""

    project_id: UUID | None = None
    project_role: PermissionRole | None = None
    ceiling_applied: bool = False
    creator: CreatorSource | None = None
    grants: GrantSource | None = None


@dataclass
class ResolvedPermissions:
    """Final role and capability flags for one user on one entity."""

    role: PermissionRole | None
    can_view: bool
    can_edit: bool
    can_comment: bool
    can_manage: bool
    source: PermissionSource = field(default_factory=PermissionSource)

    @classmethod
    def for_role(
        cls, role: PermissionRole | None, source: PermissionSource | None = None
    ) -> "ResolvedPermissions":
        source = source or PermissionSource()
        if role is None:
            return cls(None, False, False, False, False, source)
        return cls(
            role=role,
            can_view=True,
            can_edit=role in (PermissionRole.OWNER, PermissionRole.EDITOR),
            can_comment=role is not PermissionRole.VIEWER,
            can_manage=role is PermissionRole.OWNER,
            source=source,
        )

    def to_dict(self) -> dict:
        src = self.source
        data: dict = {
            "role": self.role.value if self.role else None,
            "can_view": self.can_view,
            "can_edit": self.can_edit,
            "can_comment": self.can_comment,
            "can_manage": self.can_manage,
            "source": {
                "project_id": str(src.project_id) if src.project_id else None,
                "project_role": src.project_role.value if src.project_role else None,
                "ceiling_applied": src.ceiling_applied,
            },
        }
        if src.creator:
            data["source"]["creator"] = {
                "is_creator": src.creator.is_creator,
                "revoked": src.creator.revoked,
                "would_grant_role": (
                    src.creator.would_grant_role.value
                    if src.creator.would_grant_role
                    else None
                ),
            }
        if src.grants:
            data["source"]["grants"] = {
                "direct_user_role": (
                    src.grants.direct_user_role.value
                    if src.grants.direct_user_role
                    else None
                ),
                "group_roles": [
                    {"group_id": str(g.group_id), "role": g.role.value}
                    for g in src.grants.group_roles
                ],
                "highest_grant_role": (
                    src.grants.highest_grant_role.value
                    if src.grants.highest_grant_role
                    else None
                ),
            }
        return data
