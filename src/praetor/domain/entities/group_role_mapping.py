"""Directory group to role mapping."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GroupRoleMapping:
    """Maps an external directory group (exact string) to a role id."""

    external_group: str
    role_id: str

    def to_dict(self) -> dict[str, str]:
        return {"ldapGroup": self.external_group, "role": self.role_id}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GroupRoleMapping":
        return cls(
            external_group=str(data.get("ldapGroup") or ""),
            role_id=str(data.get("role") or ""),
        )
