"""Application route table - every navigable view and the permission it needs."""

from collections.abc import Mapping
from types import MappingProxyType

from praetor.domain.codec import build_permission
from praetor.domain.value_objects import PermissionAction

_VIEW_RESOURCES: tuple[tuple[str, str], ...] = (
    ("timesheets/tracker", "timesheets.tracker"),
    ("timesheets/recurring", "timesheets.recurring"),
    ("administration/authentication", "administration.authentication"),
    ("administration/general", "administration.general"),
    ("administration/user-management", "administration.user_management"),
    ("administration/work-units", "administration.work_units"),
    ("administration/email", "administration.email"),
    ("administration/roles", "administration.roles"),
    ("crm/clients", "crm.clients"),
    ("crm/suppliers", "crm.suppliers"),
    ("sales/client-quotes", "sales.client_quotes"),
    ("catalog/internal-listing", "catalog.internal_listing"),
    ("catalog/external-listing", "catalog.external_listing"),
    ("catalog/special-bids", "catalog.special_bids"),
    ("accounting/clients-orders", "accounting.clients_orders"),
    ("accounting/clients-invoices", "accounting.clients_invoices"),
    ("finances/payments", "finances.payments"),
    ("finances/expenses", "finances.expenses"),
    ("projects/manage", "projects.manage"),
    ("projects/tasks", "projects.tasks"),
    ("suppliers/manage", "crm.suppliers"),
    ("suppliers/quotes", "suppliers.quotes"),
    ("hr/internal", "hr.internal"),
    ("hr/external", "hr.external"),
    ("settings", "settings"),
    ("docs/api", "docs.api"),
    ("docs/frontend", "docs.frontend"),
)


def build_view_permission_map() -> Mapping[str, str]:
    """Read-only view id -> required ``view`` permission table."""
    return MappingProxyType(
        {
            view_id: build_permission(resource, PermissionAction.VIEW)
            for view_id, resource in _VIEW_RESOURCES
        }
    )
