"""Permission checker port - RBAC authorization."""

from typing import Protocol


class PermissionChecker(Protocol):
    """Port for resolving and checking a role's granted permissions."""

    async def permissions_for(self, role_id: str) -> frozenset[str]: ...

    async def check(self, role_id: str, permission: str) -> bool: ...
