"""Repository ports."""

from entitygrants.application.ports.repositories.creator_revocation_repository import (
    CreatorRevocationRepository,
)
from entitygrants.application.ports.repositories.entity_repository import EntityRepository
from entitygrants.application.ports.repositories.grant_repository import GrantRepository
from entitygrants.application.ports.repositories.group_repository import GroupRepository
from entitygrants.application.ports.repositories.project_repository import (
    ProjectRepository,
)

__all__ = [
    "CreatorRevocationRepository",
    "EntityRepository",
    "GrantRepository",
    "GroupRepository",
    "ProjectRepository",
]
