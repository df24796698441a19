"""Create role use case."""

import logging
from collections.abc import Iterable
from uuid import uuid4

from praetor.application.use_cases.role.common import granted_permissions, require_role_name
from praetor.domain.catalog import PermissionCatalog
from praetor.domain.entities import Role
from praetor.domain.exceptions import ConflictError, ValidationError

logger = logging.getLogger(__name__)


class CreateRoleUseCase:
    """Create a non-system role; the baseline permissions are always added."""

    def __init__(
        self,
        unit_of_work_factory: type,
        catalog: PermissionCatalog,
        strict_permissions: bool = True,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._catalog = catalog
        self._strict = strict_permissions

    async def execute(self, name: str, requested_permissions: Iterable[str] = ()) -> Role:
        role_name = require_role_name(name)
        permissions = granted_permissions(
            self._catalog, requested_permissions, strict=self._strict
        )

        async with self._uow_factory() as uow:
            if await uow.roles.get_by_name(role_name):
                raise ValidationError(f"Role name already exists: {role_name}")
            role = Role(
                id=f"role-{uuid4()}",
                name=role_name,
                permissions=permissions,
                is_system=False,
                is_admin=False,
            )
            try:
                await uow.roles.create(role)
            except ConflictError as e:
                raise ValidationError(f"Role name already exists: {role_name}") from e

        logger.info(
            "role.created",
            extra={"role_id": role.id, "permission_count": len(role.permissions)},
        )
        return role
