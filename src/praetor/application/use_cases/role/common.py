"""Rules shared by the role use cases."""

from collections.abc import Iterable

from praetor.domain.catalog import PermissionCatalog
from praetor.domain.codec import normalize_permission
from praetor.domain.exceptions import ValidationError


def require_role_name(name: str | None) -> str:
    """Return the stripped name or raise ValidationError when blank."""
    if name is None or not str(name).strip():
        raise ValidationError("name is required")
    return str(name).strip()


def granted_permissions(
    catalog: PermissionCatalog,
    requested: Iterable[str],
    *,
    strict: bool,
) -> frozenset[str]:
    """Requested permissions plus the baseline every role receives.

    Legacy prefixes are normalized. With ``strict`` set, permissions the
    catalog does not define are rejected.
    """
    normalized = [normalize_permission(str(p)) for p in requested]
    if strict:
        for permission in normalized:
            if not catalog.is_known(permission):
                raise ValidationError(f"Unknown permission: {permission}")
    return frozenset(normalized) | catalog.always_granted_permissions()
