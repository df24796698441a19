"""Repository ports."""

from praetor.application.ports.repositories.directory_config_repository import (
    DirectoryConfigRepository,
)
from praetor.application.ports.repositories.role_repository import RoleRepository
from praetor.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "DirectoryConfigRepository",
    "RoleRepository",
    "UserRepository",
]
