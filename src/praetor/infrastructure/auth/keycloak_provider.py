"""Keycloak OIDC provider for bearer token validation."""

import logging
from dataclasses import dataclass, field

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

logger = logging.getLogger(__name__)


@dataclass
class OIDCUser:
    """Authenticated user from OIDC token."""

    user_id: str
    email: str | None
    username: str | None
    name: str | None = None
    groups: frozenset[str] = field(default_factory=frozenset)


class KeycloakProvider:
    """Keycloak OIDC - introspects tokens and extracts user info and groups."""

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

    def decode_token(self, token: str) -> OIDCUser | None:
        """Introspect token, return user info or None when inactive or invalid.

        Groups come from the ``groups`` claim (Keycloak group membership mapper)
        and are matched against role mappings by exact string.
        """
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError as e:
            logger.warning("oidc.introspect.failed", extra={"error": str(e)})
            return None
        if not token_info.get("active"):
            return None
        return OIDCUser(
            user_id=token_info.get("sub", ""),
            email=token_info.get("email"),
            username=token_info.get("preferred_username"),
            name=token_info.get("name"),
            groups=frozenset(token_info.get("groups") or []),
        )
