"""Replace a role's permission set."""

import logging
from collections.abc import Iterable
from dataclasses import replace

from praetor.application.use_cases.role.common import granted_permissions
from praetor.domain.catalog import PermissionCatalog
from praetor.domain.entities import Role
from praetor.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class SetRolePermissionsUseCase:
    """Full replacement of a role's permissions, allowed for every role.

    The baseline grants are re-added on every call and cannot be removed here.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        catalog: PermissionCatalog,
        strict_permissions: bool = True,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._catalog = catalog
        self._strict = strict_permissions

    async def execute(self, role_id: str, requested_permissions: Iterable[str]) -> Role:
        permissions = granted_permissions(
            self._catalog, requested_permissions, strict=self._strict
        )
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", role_id)
            updated = replace(role, permissions=permissions)
            await uow.roles.update(updated)

        logger.info(
            "role.permissions.updated",
            extra={"role_id": role_id, "permission_count": len(permissions)},
        )
        return updated
