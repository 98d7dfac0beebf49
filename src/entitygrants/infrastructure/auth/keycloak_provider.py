"""Keycloak OIDC provider for bearer token introspection."""

import logging
from dataclasses import dataclass

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

logger = logging.getLogger(__name__)


@dataclass
class OIDCUser:
    """Authenticated user from OIDC token. user_id is the profile id claim or sub."""

    user_id: str
    email: str | None
    username: str | None


class KeycloakProvider:
    """Keycloak OIDC - introspects tokens and extracts the acting user."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
        user_id_claim: str = "profile_id",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )
        self._user_id_claim = user_id_claim

    def decode_token(self, token: str) -> OIDCUser | None:
        """Introspect token, return user info or None when inactive or unverifiable."""
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError as e:
            logger.warning("Token introspection failed: %s", e)
            return None
        if not token_info.get("active"):
            return None
        return OIDCUser(
            user_id=token_info.get(self._user_id_claim) or token_info.get("sub", ""),
            email=token_info.get("email"),
            username=token_info.get("preferred_username"),
        )
