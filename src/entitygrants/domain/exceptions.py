"""Domain exceptions."""


class EntityGrantsError(Exception):
    """Base exception for entity grants."""

    pass


class FeatureDisabled(EntityGrantsError):
    """Feature flag guarding the operation is off. Nothing was read or written."""

    def __init__(self, feature: str) -> None:
        super().__init__(f"Feature '{feature}' is disabled")
        self.feature = feature


class EntityNotFound(EntityGrantsError):
    """Entity reference does not resolve to a project."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        super().__init__(f"{entity_type} {entity_id} not found")
        self.entity_type = entity_type
        self.entity_id = entity_id


class NotProjectOwner(EntityGrantsError):
    """Actor is not the owner of the project that owns the entity."""

    pass


class InvalidRole(EntityGrantsError):
    """Requested role cannot be granted at entity level."""

    pass


class SubjectNotEligible(EntityGrantsError):
    """User is not a project member, or group is missing or archived."""

    pass


class GrantNotFound(EntityGrantsError):
    """Grant id does not exist."""

    def __init__(self, grant_id: object) -> None:
        super().__init__(f"Grant {grant_id} not found")
        self.grant_id = grant_id


class GrantConflict(EntityGrantsError):
    """Another active grant for the same entity and subject was written concurrently."""

    pass


class RevocationConflict(EntityGrantsError):
    """A creator rights revocation for the same entity and creator was written concurrently."""

    pass


class ValidationError(EntityGrantsError):
    """Validation failed for input data."""

    pass
