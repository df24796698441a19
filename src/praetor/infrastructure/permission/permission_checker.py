"""Permission checker implementation - checks against a role's stored permissions."""

from praetor.domain.authorization import has_permission


class RolePermissionChecker:
    """Loads a role's permission set and answers membership questions.

    Unknown roles resolve to an empty set. ``is_admin`` is not consulted.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def permissions_for(self, role_id: str) -> frozenset[str]:
        """Granted permissions of role, empty when the role does not exist."""
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
        if not role:
            return frozenset()
        return role.permissions

    async def check(self, role_id: str, permission: str) -> bool:
        """Check if role holds permission."""
        return has_permission(await self.permissions_for(role_id), permission)
