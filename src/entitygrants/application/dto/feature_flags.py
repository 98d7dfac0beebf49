"""Feature flags injected into use cases."""

from dataclasses import dataclass

from entitygrants.domain.exceptions import FeatureDisabled

ENTITY_GRANTS = "entity_grants"
CREATOR_RIGHTS = "creator_rights"


@dataclass(frozen=True)
class FeatureFlags:
    """Process-wide enablement switches, fixed at construction."""

    entity_grants: bool = False
    creator_rights: bool = False

    def require(self, feature: str) -> None:
        """Raise FeatureDisabled unless feature is on."""
        if not getattr(self, feature):
            raise FeatureDisabled(feature)

    @classmethod
    def from_settings(cls, settings) -> "FeatureFlags":
        return cls(
            entity_grants=settings.enable_entity_grants,
            creator_rights=settings.enable_creator_rights,
        )
