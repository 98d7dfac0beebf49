"""Group lookup result."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GroupStatus:
    """Existence and archive state of a team group."""

    exists: bool
    archived: bool = False

    @property
    def eligible(self) -> bool:
        return self.exists and not self.archived


MISSING_GROUP = GroupStatus(exists=False)
