"""Role repository port."""

from typing import Protocol

from praetor.domain.entities import Role


class RoleRepository(Protocol):
    """Port for role persistence. Storage guarantees name uniqueness."""

    async def get_by_id(self, role_id: str) -> Role | None: ...

    async def get_by_name(self, name: str) -> Role | None: ...

    async def list_all(self) -> list[Role]: ...

    async def create(self, role: Role) -> Role:
        """Insert role. Raises ConflictError when the name is taken."""
        ...

    async def update(self, role: Role) -> Role:
        """Persist name and full permission set. Raises ConflictError on name clash."""
        ...

    async def delete(self, role_id: str) -> None:
        """Remove role. Raises RoleInUse when users still reference it."""
        ...
