"""Role entity for RBAC."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Role:
    """Named set of granted permission strings.

    ``is_system`` and ``is_admin`` are fixed at creation. Either flag protects
    the role record from rename and delete; neither grants anything by itself.
    """

    id: str
    name: str
    permissions: frozenset[str] = field(default_factory=frozenset)
    is_system: bool = False
    is_admin: bool = False

    @property
    def is_protected(self) -> bool:
        return self.is_system or self.is_admin

    def to_dict(self) -> dict[str, Any]:
        """Interchange representation."""
        return {
            "id": self.id,
            "name": self.name,
            "permissions": sorted(self.permissions),
            "isSystem": self.is_system,
            "isAdmin": self.is_admin,
        }
