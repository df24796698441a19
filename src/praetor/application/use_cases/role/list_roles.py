"""List and fetch roles."""

from praetor.domain.entities import Role
from praetor.domain.exceptions import NotFound


def role_sort_key(role: Role) -> tuple[str, str]:
    """Case-insensitive collation with the raw name as a stable tie-break."""
    return (role.name.casefold(), role.name)


class ListRolesUseCase:
    """All roles sorted by name."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> list[Role]:
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_all()
        return sorted(roles, key=role_sort_key)


class GetRoleUseCase:
    """Single role by id."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: str) -> Role:
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
        if not role:
            raise NotFound("Role", role_id)
        return role
