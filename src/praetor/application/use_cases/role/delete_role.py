"""Delete role use case."""

import logging

from praetor.domain.exceptions import ForbiddenError, NotFound, RoleInUse

logger = logging.getLogger(__name__)


class DeleteRoleUseCase:
    """Delete a role that is neither protected nor assigned to any user."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: str) -> None:
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", role_id)
            if role.is_protected:
                raise ForbiddenError("System roles cannot be deleted")
            if await uow.users.count_by_role(role_id):
                raise RoleInUse(role_id)
            await uow.roles.delete(role_id)

        logger.info("role.deleted", extra={"role_id": role_id})
