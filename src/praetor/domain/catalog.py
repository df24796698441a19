"""Permission catalog - immutable table of every protectable resource.

The catalog is built once by the composition root and passed to whatever
needs it; nothing looks it up globally.
"""

from collections.abc import Iterable

from praetor.domain.codec import build_permissions
from praetor.domain.entities import PermissionDefinition
from praetor.domain.value_objects import (
    CRUD,
    VIEW_ONLY,
    VIEW_UPDATE,
    VIEW_UPDATE_DELETE,
)

ALWAYS_VISIBLE_MODULES: tuple[str, ...] = ("settings", "docs", "notifications")


class PermissionCatalog:
    """Ordered, read-only collection of permission definitions."""

    def __init__(
        self,
        definitions: Iterable[PermissionDefinition],
        always_visible_modules: Iterable[str] = ALWAYS_VISIBLE_MODULES,
    ) -> None:
        self._definitions = tuple(definitions)
        seen: set[str] = set()
        for definition in self._definitions:
            if definition.resource in seen:
                raise ValueError(f"Duplicate permission resource: {definition.resource}")
            seen.add(definition.resource)
        self._by_resource = {d.resource: d for d in self._definitions}
        self._always_visible_modules = tuple(always_visible_modules)
        self._all_permissions = tuple(
            p for d in self._definitions for p in build_permissions(d.resource, d.actions)
        )
        self._known = frozenset(self._all_permissions)
        self._always_granted = self.module_permissions(*self._always_visible_modules)

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self):
        return iter(self._definitions)

    def list_definitions(self) -> tuple[PermissionDefinition, ...]:
        """All definitions in declaration order."""
        return self._definitions

    def definitions_by_module(self) -> dict[str, tuple[PermissionDefinition, ...]]:
        """Definitions grouped by module, modules in first-seen order."""
        grouped: dict[str, list[PermissionDefinition]] = {}
        for definition in self._definitions:
            grouped.setdefault(definition.module, []).append(definition)
        return {module: tuple(defs) for module, defs in grouped.items()}

    def get(self, resource: str) -> PermissionDefinition | None:
        return self._by_resource.get(resource)

    def all_permissions(self) -> tuple[str, ...]:
        """Every permission string the catalog defines, in declaration order."""
        return self._all_permissions

    def is_known(self, permission: str) -> bool:
        return permission in self._known

    def module_permissions(self, *modules: str) -> frozenset[str]:
        """Full action expansion of every definition in the given modules."""
        wanted = set(modules)
        return frozenset(
            p
            for d in self._definitions
            if d.module in wanted
            for p in build_permissions(d.resource, d.actions)
        )

    @property
    def always_visible_modules(self) -> tuple[str, ...]:
        return self._always_visible_modules

    def always_granted_permissions(self) -> frozenset[str]:
        """Baseline every role receives (settings, docs, notifications)."""
        return self._always_granted


def build_default_catalog() -> PermissionCatalog:
    """Build the application catalog."""
    return PermissionCatalog(
        [
            # Timesheets
            PermissionDefinition("timesheets.tracker", CRUD),
            PermissionDefinition("timesheets.recurring", CRUD),
            PermissionDefinition("timesheets.tracker_all", VIEW_ONLY, is_scope=True),
            # CRM
            PermissionDefinition("crm.clients", CRUD),
            PermissionDefinition("crm.clients_all", VIEW_ONLY, is_scope=True),
            PermissionDefinition("crm.suppliers", CRUD),
            PermissionDefinition("crm.suppliers_all", VIEW_ONLY, is_scope=True),
            # Sales
            PermissionDefinition("sales.client_quotes", CRUD),
            # Catalog
            PermissionDefinition("catalog.internal_listing", CRUD),
            PermissionDefinition("catalog.external_listing", CRUD),
            PermissionDefinition("catalog.special_bids", CRUD),
            # Accounting
            PermissionDefinition("accounting.clients_orders", CRUD),
            PermissionDefinition("accounting.clients_invoices", CRUD),
            # Finances
            PermissionDefinition("finances.payments", CRUD),
            PermissionDefinition("finances.expenses", CRUD),
            # Projects
            PermissionDefinition("projects.manage", CRUD),
            PermissionDefinition("projects.manage_all", VIEW_ONLY, is_scope=True),
            PermissionDefinition("projects.tasks", CRUD),
            PermissionDefinition("projects.tasks_all", VIEW_ONLY, is_scope=True),
            # Suppliers
            PermissionDefinition("suppliers.quotes", CRUD),
            # HR
            PermissionDefinition("hr.internal", CRUD),
            PermissionDefinition("hr.external", CRUD),
            # Administration
            PermissionDefinition("administration.authentication", VIEW_UPDATE),
            PermissionDefinition("administration.general", VIEW_UPDATE),
            PermissionDefinition("administration.user_management", CRUD),
            PermissionDefinition(
                "administration.user_management_all", VIEW_ONLY, is_scope=True
            ),
            PermissionDefinition("administration.work_units", CRUD),
            PermissionDefinition("administration.work_units_all", VIEW_ONLY, is_scope=True),
            PermissionDefinition("administration.email", VIEW_UPDATE),
            PermissionDefinition("administration.roles", CRUD),
            # Standalone
            PermissionDefinition("settings", VIEW_UPDATE),
            PermissionDefinition("docs.api", VIEW_ONLY),
            PermissionDefinition("docs.frontend", VIEW_ONLY),
            PermissionDefinition("notifications", VIEW_UPDATE_DELETE),
        ]
    )
