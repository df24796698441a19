"""Rename role use case."""

import logging
from dataclasses import replace

from praetor.application.use_cases.role.common import require_role_name
from praetor.domain.entities import Role
from praetor.domain.exceptions import ConflictError, ForbiddenError, NotFound, ValidationError

logger = logging.getLogger(__name__)


class RenameRoleUseCase:
    """Rename a role. System and admin roles keep their names."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: str, new_name: str) -> Role:
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", role_id)
            if role.is_protected:
                raise ForbiddenError("System roles cannot be renamed")

            role_name = require_role_name(new_name)
            existing = await uow.roles.get_by_name(role_name)
            if existing and existing.id != role.id:
                raise ValidationError(f"Role name already exists: {role_name}")

            renamed = replace(role, name=role_name)
            try:
                await uow.roles.update(renamed)
            except ConflictError as e:
                raise ValidationError(f"Role name already exists: {role_name}") from e

        logger.info("role.renamed", extra={"role_id": role_id})
        return renamed
