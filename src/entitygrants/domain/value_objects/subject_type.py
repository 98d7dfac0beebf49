"""Grant subject kinds."""

from enum import StrEnum


class SubjectType(StrEnum):
    """Who receives a grant."""

    USER = "user"
    GROUP = "group"
