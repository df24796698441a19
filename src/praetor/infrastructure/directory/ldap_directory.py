"""LDAP directory adapter built on ldap3.

ldap3 is synchronous; every directory round trip runs in a worker thread.
"""

import asyncio
import logging
import ssl

from ldap3 import NONE, SUBTREE, Connection, Server, Tls
from ldap3.core.exceptions import LDAPBindError, LDAPException
from ldap3.utils.conv import escape_filter_chars
from ldap3.utils.dn import parse_dn

from praetor.domain.entities import DirectoryConfig, DirectoryUser
from praetor.domain.exceptions import DirectoryError

logger = logging.getLogger(__name__)

_USER_ATTRIBUTES = ["uid", "sAMAccountName", "cn", "displayName"]


def group_identifiers(group_dn: str) -> set[str]:
    """Full DN plus its leading RDN (``cn=admins``) so either form can be mapped."""
    identifiers = {group_dn}
    try:
        rdns = parse_dn(group_dn)
    except LDAPException:
        return identifiers
    if rdns:
        attr, value, _ = rdns[0]
        identifiers.add(f"{attr.lower()}={value}")
    return identifiers


def _first(value: object) -> str | None:
    if isinstance(value, list):
        value = value[0] if value else None
    return str(value) if value else None


class LdapDirectory:
    """Directory port implementation for LDAP / Active Directory."""

    def __init__(
        self,
        reject_unauthorized: bool = True,
        ca_file: str | None = None,
        timeout: int = 10,
    ) -> None:
        self._tls = Tls(
            validate=ssl.CERT_REQUIRED if reject_unauthorized else ssl.CERT_NONE,
            ca_certs_file=ca_file or None,
        )
        self._timeout = timeout

    def _server(self, config: DirectoryConfig) -> Server:
        return Server(
            config.server_url,
            tls=self._tls,
            get_info=NONE,
            connect_timeout=self._timeout,
        )

    def _service_connection(self, server: Server, config: DirectoryConfig) -> Connection:
        """Bound service connection. A rejected bind is a configuration error."""
        try:
            return Connection(
                server,
                user=config.bind_dn or None,
                password=config.bind_password or None,
                auto_bind=True,
                receive_timeout=self._timeout,
            )
        except LDAPBindError as e:
            raise DirectoryError(f"LDAP service bind failed: {e}") from e

    def _user_bind(self, server: Server, user_dn: str, password: str) -> bool:
        user_conn = Connection(
            server, user=user_dn, password=password, receive_timeout=self._timeout
        )
        try:
            return bool(user_conn.bind())
        except LDAPBindError:
            return False
        finally:
            user_conn.unbind()

    def _groups_for(self, conn: Connection, config: DirectoryConfig, user_dn: str) -> frozenset[str]:
        group_filter = config.group_filter.replace("{0}", escape_filter_chars(user_dn))
        conn.search(config.group_base_dn, group_filter, search_scope=SUBTREE, attributes=[])
        groups: set[str] = set()
        for entry in conn.entries:
            groups |= group_identifiers(entry.entry_dn)
        return frozenset(groups)

    def _authenticate(
        self, config: DirectoryConfig, username: str, password: str
    ) -> DirectoryUser | None:
        server = self._server(config)
        conn = self._service_connection(server, config)
        try:
            user_filter = config.user_filter.replace("{0}", escape_filter_chars(username))
            conn.search(config.base_dn, user_filter, search_scope=SUBTREE, attributes=["cn"])
            if not conn.entries:
                return None
            entry = conn.entries[0]
            user_dn = entry.entry_dn

            if not self._user_bind(server, user_dn, password):
                logger.info("ldap.user.bind.rejected", extra={"user_dn": user_dn})
                return None

            name = _first(entry.entry_attributes_as_dict.get("cn")) or username
            return DirectoryUser(
                username=username,
                name=name,
                groups=self._groups_for(conn, config, user_dn),
            )
        finally:
            conn.unbind()

    def _list_users(self, config: DirectoryConfig) -> list[DirectoryUser]:
        server = self._server(config)
        conn = self._service_connection(server, config)
        try:
            user_filter = config.user_filter.replace("{0}", "*")
            conn.search(
                config.base_dn,
                user_filter,
                search_scope=SUBTREE,
                attributes=_USER_ATTRIBUTES,
            )
            entries = list(conn.entries)
            users: list[DirectoryUser] = []
            for entry in entries:
                attrs = entry.entry_attributes_as_dict
                username = _first(attrs.get("uid")) or _first(attrs.get("sAMAccountName"))
                if not username:
                    logger.warning("ldap.entry.skipped", extra={"dn": entry.entry_dn})
                    continue
                name = _first(attrs.get("cn")) or _first(attrs.get("displayName")) or username
                users.append(
                    DirectoryUser(
                        username=username,
                        name=name,
                        groups=self._groups_for(conn, config, entry.entry_dn),
                    )
                )
            return users
        finally:
            conn.unbind()

    async def authenticate(
        self, config: DirectoryConfig, username: str, password: str
    ) -> DirectoryUser | None:
        """Service bind, locate user DN, re-bind as the user, collect groups."""
        try:
            return await asyncio.to_thread(self._authenticate, config, username, password)
        except LDAPException as e:
            raise DirectoryError(f"LDAP authentication failed: {e}") from e

    async def list_users(self, config: DirectoryConfig) -> list[DirectoryUser]:
        """Every user matched by ``user_filter`` with ``{0}`` replaced by ``*``."""
        try:
            users = await asyncio.to_thread(self._list_users, config)
        except LDAPException as e:
            raise DirectoryError(f"LDAP query failed: {e}") from e
        logger.info("ldap.users.listed", extra={"user_count": len(users)})
        return users
