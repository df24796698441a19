"""Pytest fixtures for Praetor tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from uuid import UUID

import pytest

from praetor.domain.catalog import PermissionCatalog, build_default_catalog
from praetor.domain.entities import DirectoryConfig, DirectoryUser, Role, User
from praetor.domain.exceptions import ConflictError, RoleInUse


# --- Fake repositories ---


class FakeRoleRepository:
    """In-memory role repository with the unique-name and in-use guards of the real table."""

    def __init__(self, users: FakeUserRepository | None = None) -> None:
        self._by_id: dict[str, Role] = {}
        self._users = users

    async def get_by_id(self, role_id: str) -> Role | None:
        return self._by_id.get(role_id)

    async def get_by_name(self, name: str) -> Role | None:
        return next((r for r in self._by_id.values() if r.name == name), None)

    async def list_all(self) -> list[Role]:
        return list(self._by_id.values())

    async def create(self, role: Role) -> Role:
        if any(r.name == role.name for r in self._by_id.values()):
            raise ConflictError(f"Role name already exists: {role.name}")
        self._by_id[role.id] = role
        return role

    async def update(self, role: Role) -> Role:
        if any(r.name == role.name and r.id != role.id for r in self._by_id.values()):
            raise ConflictError(f"Role name already exists: {role.name}")
        self._by_id[role.id] = role
        return role

    async def delete(self, role_id: str) -> None:
        if self._users and await self._users.count_by_role(role_id):
            raise RoleInUse(role_id)
        self._by_id.pop(role_id, None)

    def add_role(self, role: Role) -> None:
        self._by_id[role.id] = role


class FakeUserRepository:
    """In-memory user repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, User] = {}

    async def get_by_username(self, username: str) -> User | None:
        return next((u for u in self._by_id.values() if u.username == username), None)

    async def create(self, user: User) -> User:
        self._by_id[user.id] = user
        return user

    async def update(self, user: User) -> User:
        self._by_id[user.id] = user
        return user

    async def count_by_role(self, role_id: str) -> int:
        return sum(1 for u in self._by_id.values() if u.role_id == role_id)

    def all(self) -> list[User]:
        return list(self._by_id.values())


class FakeDirectoryConfigRepository:
    """In-memory single-row directory configuration."""

    def __init__(self) -> None:
        self._config: DirectoryConfig | None = None

    async def get(self) -> DirectoryConfig | None:
        return self._config

    async def save(self, config: DirectoryConfig) -> DirectoryConfig:
        self._config = replace(config, role_mappings=list(config.role_mappings))
        return self._config


class FakeDirectory:
    """Directory port double: fixed users, password ``secret`` for everyone."""

    def __init__(self, users: list[DirectoryUser] | None = None) -> None:
        self.users = users or []
        self.calls: list[str] = []

    async def authenticate(
        self, config: DirectoryConfig, username: str, password: str
    ) -> DirectoryUser | None:
        self.calls.append("authenticate")
        if password != "secret":
            return None
        return next((u for u in self.users if u.username == username), None)

    async def list_users(self, config: DirectoryConfig) -> list[DirectoryUser]:
        self.calls.append("list_users")
        return list(self.users)


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.users = FakeUserRepository()
        self.roles = FakeRoleRepository(self.users)
        self.directory_config = FakeDirectoryConfigRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory that yields the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Fixtures ---


@pytest.fixture
def catalog() -> PermissionCatalog:
    """Application permission catalog."""
    return build_default_catalog()


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def fake_directory() -> FakeDirectory:
    """Directory with two users: alice (admins) and bob (no groups)."""
    return FakeDirectory(
        [
            DirectoryUser(
                username="alice",
                name="Alice",
                groups=frozenset({"cn=admins,ou=groups,dc=example,dc=com", "cn=admins"}),
            ),
            DirectoryUser(username="bob", name="Bob"),
        ]
    )
