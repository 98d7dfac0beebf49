"""Entity kinds that accept permission grants."""

from enum import StrEnum


class EntityType(StrEnum):
    """Project-scoped entities. Subtracks belong to tracks, tracks to projects."""

    TRACK = "track"
    SUBTRACK = "subtrack"
