"""User entity - the role assignment side of provisioning."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class UserSource(StrEnum):
    """Where the user account came from."""

    LOCAL = "local"
    LDAP = "ldap"
    OIDC = "oidc"


@dataclass
class User:
    """Application user with exactly one assigned role."""

    id: UUID
    username: str
    name: str
    role_id: str
    source: UserSource
    created_at: datetime


@dataclass(frozen=True)
class DirectoryUser:
    """User as reported by an external directory."""

    username: str
    name: str
    groups: frozenset[str] = frozenset()
