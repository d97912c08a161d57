"""Keycloak OIDC provider - resolves bearer tokens to the acting user."""

import logging

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

from docfork.domain.value_objects import Actor

logger = logging.getLogger(__name__)


class KeycloakProvider:
    """Keycloak OIDC - introspects tokens and extracts the actor."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    def decode_token(self, token: str) -> Actor | None:
        """Introspect token. Returns None for inactive or rejected tokens."""
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError as e:
            logger.warning("Token introspection failed: %s", e)
            return None
        if not token_info.get("active"):
            return None
        return Actor(
            user_id=token_info.get("sub", ""),
            display_name=token_info.get("name") or token_info.get("preferred_username"),
            email=token_info.get("email"),
        )
