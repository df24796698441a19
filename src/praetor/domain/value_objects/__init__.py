"""Domain value objects."""

from praetor.domain.value_objects.permission_action import (
    CANONICAL_ACTIONS,
    CRUD,
    VIEW_ONLY,
    VIEW_UPDATE,
    VIEW_UPDATE_DELETE,
    PermissionAction,
)

__all__ = [
    "CANONICAL_ACTIONS",
    "CRUD",
    "PermissionAction",
    "VIEW_ONLY",
    "VIEW_UPDATE",
    "VIEW_UPDATE_DELETE",
]
