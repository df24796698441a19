"""Permission definition - one protectable resource in the catalog."""

from dataclasses import dataclass, field

from praetor.domain.value_objects import CANONICAL_ACTIONS, PermissionAction


@dataclass(frozen=True)
class PermissionDefinition:
    """Resource with the actions it supports.

    ``actions`` is canonicalized to view, create, update, delete order.
    Scope definitions widen visibility across records and expose only ``view``.
    """

    resource: str
    actions: tuple[PermissionAction, ...]
    is_scope: bool = False
    module: str = field(init=False)

    def __post_init__(self) -> None:
        if not self.resource or not self.resource.strip():
            raise ValueError("Permission resource must not be empty")
        if not self.actions:
            raise ValueError(f"{self.resource}: actions must not be empty")
        try:
            requested = {PermissionAction(a) for a in self.actions}
        except ValueError as e:
            raise ValueError(f"{self.resource}: {e}") from e
        canonical = tuple(a for a in CANONICAL_ACTIONS if a in requested)
        if self.is_scope and canonical != (PermissionAction.VIEW,):
            raise ValueError(f"{self.resource}: scope permissions expose only 'view'")
        object.__setattr__(self, "actions", canonical)
        object.__setattr__(self, "module", self.resource.split(".")[0])
