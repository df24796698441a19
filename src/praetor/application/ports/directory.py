"""Directory port - external user directory (LDAP)."""

from typing import Protocol

from praetor.domain.entities import DirectoryConfig, DirectoryUser


class Directory(Protocol):
    """Supplies users and their group identifiers (exact strings)."""

    async def authenticate(
        self, config: DirectoryConfig, username: str, password: str
    ) -> DirectoryUser | None:
        """Verify credentials; return the user with groups, or None if rejected."""
        ...

    async def list_users(self, config: DirectoryConfig) -> list[DirectoryUser]: ...
