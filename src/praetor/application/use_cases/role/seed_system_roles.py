"""Seed the roles that ship with the product."""

import logging

from praetor.domain.catalog import PermissionCatalog
from praetor.domain.codec import build_permission, build_permissions
from praetor.domain.entities import DEFAULT_ROLE_ID, Role
from praetor.domain.value_objects import CRUD, PermissionAction

logger = logging.getLogger(__name__)

ADMIN_ROLE_ID = "admin"
MANAGER_ROLE_ID = "manager"
USER_ROLE_ID = DEFAULT_ROLE_ID

_MANAGER_CRUD_RESOURCES = (
    "timesheets.tracker",
    "timesheets.recurring",
    "crm.clients",
    "crm.suppliers",
    "sales.client_quotes",
    "catalog.internal_listing",
    "catalog.external_listing",
    "catalog.special_bids",
    "accounting.clients_orders",
    "accounting.clients_invoices",
    "finances.payments",
    "finances.expenses",
    "projects.manage",
    "projects.tasks",
    "suppliers.quotes",
    "hr.internal",
    "hr.external",
)
_MANAGER_SCOPES = (
    "crm.clients_all",
    "crm.suppliers_all",
    "projects.manage_all",
    "projects.tasks_all",
)


def default_system_roles(catalog: PermissionCatalog) -> list[Role]:
    """Admin, manager and user roles with their shipped permission sets.

    The admin role is provisioned with every catalog permission; it gets no
    implicit grants beyond that.
    """
    baseline = catalog.always_granted_permissions()
    manager = {p for r in _MANAGER_CRUD_RESOURCES for p in build_permissions(r, CRUD)}
    manager |= {build_permission(r, PermissionAction.VIEW) for r in _MANAGER_SCOPES}
    user = {
        *build_permissions("timesheets.tracker", CRUD),
        *build_permissions("timesheets.recurring", CRUD),
        build_permission("projects.manage", PermissionAction.VIEW),
        build_permission("projects.tasks", PermissionAction.VIEW),
    }
    return [
        Role(
            id=ADMIN_ROLE_ID,
            name="Admin",
            permissions=frozenset(catalog.all_permissions()),
            is_system=True,
            is_admin=True,
        ),
        Role(
            id=MANAGER_ROLE_ID,
            name="Manager",
            permissions=frozenset(manager) | baseline,
            is_system=True,
        ),
        Role(
            id=USER_ROLE_ID,
            name="User",
            permissions=frozenset(user) | baseline,
            is_system=True,
        ),
    ]


class SeedSystemRolesUseCase:
    """Create missing system roles. Existing roles are left untouched."""

    def __init__(self, unit_of_work_factory: type, catalog: PermissionCatalog) -> None:
        self._uow_factory = unit_of_work_factory
        self._catalog = catalog

    async def execute(self) -> list[Role]:
        created: list[Role] = []
        async with self._uow_factory() as uow:
            for role in default_system_roles(self._catalog):
                if await uow.roles.get_by_id(role.id):
                    continue
                await uow.roles.create(role)
                created.append(role)
        if created:
            logger.info("roles.seeded", extra={"role_ids": [r.id for r in created]})
        return created
