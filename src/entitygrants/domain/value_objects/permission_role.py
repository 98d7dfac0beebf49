"""Permission roles and their ordering."""

from enum import StrEnum


class PermissionRole(StrEnum):
    """Roles ordered owner > editor > commenter > viewer."""

    OWNER = "owner"
    EDITOR = "editor"
    COMMENTER = "commenter"
    VIEWER = "viewer"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def grantable(self) -> bool:
        """Ownership comes from the project only, never from an entity grant."""
        return self is not PermissionRole.OWNER

    def exceeds(self, other: "PermissionRole") -> bool:
        return self.rank > other.rank


_RANKS = {
    PermissionRole.OWNER: 4,
    PermissionRole.EDITOR: 3,
    PermissionRole.COMMENTER: 2,
    PermissionRole.VIEWER: 1,
}

GRANTABLE_ROLES = frozenset(r for r in PermissionRole if r.grantable)


def max_role(roles: list[PermissionRole | None]) -> PermissionRole | None:
    """Highest role in the list, ignoring None."""
    present = [r for r in roles if r is not None]
    if not present:
        return None
    return max(present, key=lambda r: r.rank)


def cap_role(role: PermissionRole | None, ceiling: PermissionRole | None) -> PermissionRole | None:
    """Lower role to ceiling when it exceeds it."""
    if role is None or ceiling is None:
        return role
    return ceiling if role.exceeds(ceiling) else role
