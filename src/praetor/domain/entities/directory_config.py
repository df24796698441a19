"""Directory (LDAP) configuration entity."""

from dataclasses import dataclass, field
from typing import Any

from praetor.domain.entities.group_role_mapping import GroupRoleMapping

DEFAULT_ROLE_ID = "user"


@dataclass
class DirectoryConfig:
    """Connection settings plus the ordered group -> role mappings."""

    enabled: bool = False
    server_url: str = "ldap://ldap.example.com:389"
    base_dn: str = "dc=example,dc=com"
    bind_dn: str = ""
    bind_password: str = ""
    user_filter: str = "(uid={0})"
    group_base_dn: str = "ou=groups,dc=example,dc=com"
    group_filter: str = "(member={0})"
    role_mappings: list[GroupRoleMapping] = field(default_factory=list)
    default_role_id: str = DEFAULT_ROLE_ID

    def to_dict(self) -> dict[str, Any]:
        return {
            "enabled": self.enabled,
            "serverUrl": self.server_url,
            "baseDn": self.base_dn,
            "bindDn": self.bind_dn,
            "bindPassword": self.bind_password,
            "userFilter": self.user_filter,
            "groupBaseDn": self.group_base_dn,
            "groupFilter": self.group_filter,
            "roleMappings": [m.to_dict() for m in self.role_mappings],
            "defaultRole": self.default_role_id,
        }
