"""Directory provisioning - pick one role from a user's group memberships."""

from collections.abc import Collection, Iterable

from praetor.domain.entities import GroupRoleMapping


def resolve_role(
    user_groups: Collection[str],
    mappings: Iterable[GroupRoleMapping],
    default_role_id: str,
) -> str:
    """First mapping (in configured order) whose group the user belongs to wins.

    Mappings are neither re-sorted nor deduplicated. Falls back to
    ``default_role_id`` when no mapping matches.
    """
    for mapping in mappings:
        if mapping.external_group in user_groups:
            return mapping.role_id
    return default_role_id
