"""Permission actions for RBAC."""

from enum import StrEnum


class PermissionAction(StrEnum):
    """Actions that can be granted on a resource, in canonical order."""

    VIEW = "view"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


CANONICAL_ACTIONS: tuple[PermissionAction, ...] = tuple(PermissionAction)

CRUD: tuple[PermissionAction, ...] = CANONICAL_ACTIONS
VIEW_ONLY: tuple[PermissionAction, ...] = (PermissionAction.VIEW,)
VIEW_UPDATE: tuple[PermissionAction, ...] = (PermissionAction.VIEW, PermissionAction.UPDATE)
VIEW_UPDATE_DELETE: tuple[PermissionAction, ...] = (
    PermissionAction.VIEW,
    PermissionAction.UPDATE,
    PermissionAction.DELETE,
)
