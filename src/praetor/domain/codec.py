"""Permission codec - the only place permission strings are assembled.

A permission is ``"<resource>.<action>"``. Resources are dot-namespaced, so
parsing splits on the last dot and requires a canonical action keyword there.
"""

import re
from collections.abc import Iterable

from praetor.domain.value_objects import PermissionAction

SEPARATOR = "."
LEGACY_PREFIX = "configuration."
CURRENT_PREFIX = "administration."
SCOPE_SUFFIX = "_all"

_API_WORD = re.compile(r"\bApi\b")


def build_permission(resource: str, action: PermissionAction | str) -> str:
    """Build ``resource.action``. No catalog validation."""
    return f"{resource}{SEPARATOR}{action}"


def build_permissions(
    resource: str, actions: Iterable[PermissionAction | str]
) -> list[str]:
    """Build one permission per action, preserving input order."""
    return [build_permission(resource, action) for action in actions]


def parse_permission(permission: str) -> tuple[str, PermissionAction]:
    """Split a permission into (resource, action).

    Raises ValueError when the string has no resource or the suffix is not
    a canonical action.
    """
    resource, sep, action = permission.rpartition(SEPARATOR)
    if not sep or not resource:
        raise ValueError(f"Malformed permission: {permission!r}")
    try:
        return resource, PermissionAction(action)
    except ValueError:
        raise ValueError(f"Unknown action in permission: {permission!r}") from None


def normalize_permission(permission: str) -> str:
    """Rewrite the legacy ``configuration.`` prefix to ``administration.``."""
    if permission.startswith(LEGACY_PREFIX):
        return CURRENT_PREFIX + permission[len(LEGACY_PREFIX) :]
    return permission


def _title_case(value: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in value.split("_"))


def format_permission_label(resource: str) -> str:
    """Human-readable label for a resource.

    ``administration.user_management`` -> ``User Management``;
    ``timesheets.tracker_all`` -> ``Tracker (All)``; ``docs.api`` -> ``API``.
    """
    parts = resource.split(SEPARATOR)
    name = SEPARATOR.join(parts[1:]) if len(parts) > 1 else parts[0]
    if name.endswith(SCOPE_SUFFIX):
        base = name[: -len(SCOPE_SUFFIX)]
        return f"{_title_case(base)} (All)"
    return _API_WORD.sub("API", _title_case(name), count=1)
