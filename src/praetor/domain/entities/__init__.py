"""Domain entities."""

from praetor.domain.entities.directory_config import DEFAULT_ROLE_ID, DirectoryConfig
from praetor.domain.entities.group_role_mapping import GroupRoleMapping
from praetor.domain.entities.permission_definition import PermissionDefinition
from praetor.domain.entities.role import Role
from praetor.domain.entities.user import DirectoryUser, User, UserSource

__all__ = [
    "DEFAULT_ROLE_ID",
    "DirectoryConfig",
    "DirectoryUser",
    "GroupRoleMapping",
    "PermissionDefinition",
    "Role",
    "User",
    "UserSource",
]
