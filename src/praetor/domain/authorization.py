"""Authorization decisions - exact-string membership over a granted set.

There is no wildcard, prefix or hierarchy matching and no admin bypass: an
admin role is authorized only by the permission strings it holds. Anything
missing or malformed never matches, so every unknown permission is a denial.
"""

from collections.abc import Collection, Iterable, Mapping


def has_permission(granted: Collection[str] | None, required: str) -> bool:
    """True iff ``required`` is in ``granted``."""
    if not granted:
        return False
    return required in granted


def has_any_permission(granted: Collection[str] | None, alternatives: Iterable[str]) -> bool:
    """True iff at least one alternative is granted (e.g. scope or base permission)."""
    return any(has_permission(granted, p) for p in alternatives)


def has_all_permissions(granted: Collection[str] | None, required: Iterable[str]) -> bool:
    """True iff every required permission is granted."""
    return all(has_permission(granted, p) for p in required)


def resolve_visible_views(
    granted: Collection[str] | None, view_permission_map: Mapping[str, str]
) -> frozenset[str]:
    """Views whose required permission is granted.

    Navigation visibility and route enforcement both go through here.
    """
    return frozenset(
        view_id
        for view_id, required in view_permission_map.items()
        if has_permission(granted, required)
    )


def can_access_view(
    granted: Collection[str] | None,
    view_id: str,
    view_permission_map: Mapping[str, str],
) -> bool:
    """Route gate for a single view. Views missing from the table are denied."""
    if view_id not in view_permission_map:
        return False
    return view_id in resolve_visible_views(granted, {view_id: view_permission_map[view_id]})
