"""User repository port."""

from typing import Protocol

from praetor.domain.entities import User


class UserRepository(Protocol):
    """Port for the user <-> role assignment side of provisioning."""

    async def get_by_username(self, username: str) -> User | None: ...

    async def create(self, user: User) -> User: ...

    async def update(self, user: User) -> None: ...

    async def count_by_role(self, role_id: str) -> int: ...
