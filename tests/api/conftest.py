"""Fixtures for API tests."""

from datetime import UTC, datetime
from uuid import uuid4

import falcon.asgi
import pytest
from falcon.testing import TestClient

from praetor.application.use_cases.directory import (
    GetDirectoryConfigUseCase,
    ProvisionDirectoryUserUseCase,
    SaveDirectoryConfigUseCase,
    SyncDirectoryUsersUseCase,
)
from praetor.application.use_cases.role import (
    CreateRoleUseCase,
    DeleteRoleUseCase,
    GetRoleUseCase,
    ListRolesUseCase,
    RenameRoleUseCase,
    SetRolePermissionsUseCase,
)
from praetor.application.use_cases.role.seed_system_roles import default_system_roles
from praetor.domain.entities import User, UserSource
from praetor.domain.routes import build_view_permission_map
from praetor.infrastructure.auth.keycloak_provider import OIDCUser
from praetor.infrastructure.permission.permission_checker import RolePermissionChecker
from praetor.interfaces.api.middleware.auth import AuthMiddleware
from praetor.interfaces.api.middleware.cors import CORSMiddleware
from praetor.interfaces.api.resources.access import AccessResource, ViewAccessResource
from praetor.interfaces.api.resources.directory import (
    DirectoryConfigResource,
    DirectorySyncResource,
)
from praetor.interfaces.api.resources.health import HealthResource
from praetor.interfaces.api.resources.permissions import PermissionCatalogResource
from praetor.interfaces.api.resources.roles import (
    RolePermissionsResource,
    RoleResource,
    RolesResource,
)

# Bearer token -> username of a pre-provisioned user.
TOKEN_USERS = {"admin-token": ("root", "admin"), "user-token": ("plain", "user")}
ADMIN = {"Authorization": "Bearer admin-token"}
USER = {"Authorization": "Bearer user-token"}
INVALID = {"Authorization": "Bearer expired"}
ORIGIN = "http://localhost:5173"


class FakeKeycloakProvider:
    """Accepts the tokens in TOKEN_USERS plus ``new-<name>`` for first-time users."""

    def decode_token(self, token: str) -> OIDCUser | None:
        if token in TOKEN_USERS:
            username = TOKEN_USERS[token][0]
        elif token.startswith("new-"):
            username = token[4:]
        else:
            return None
        return OIDCUser(
            user_id=f"sub-{username}",
            email=f"{username}@example.com",
            username=username,
            groups=frozenset({"cn=admins"}) if username == "boss" else frozenset(),
        )


@pytest.fixture
def seeded_uow(fake_uow, catalog):
    """UoW holding the system roles and one user per test token."""
    for role in default_system_roles(catalog):
        fake_uow.roles.add_role(role)
    for username, role_id in TOKEN_USERS.values():
        user = User(
            id=uuid4(),
            username=username,
            name=username.title(),
            role_id=role_id,
            source=UserSource.OIDC,
            created_at=datetime.now(UTC),
        )
        fake_uow.users._by_id[user.id] = user
    return fake_uow


@pytest.fixture
def app(seeded_uow, uow_factory, catalog, fake_directory):
    """Falcon ASGI app with API resources for testing."""
    provision = ProvisionDirectoryUserUseCase(uow_factory)
    get_config = GetDirectoryConfigUseCase(uow_factory)
    views = build_view_permission_map()

    app = falcon.asgi.App(
        middleware=[
            CORSMiddleware([ORIGIN]),
            AuthMiddleware(
                FakeKeycloakProvider(), provision, RolePermissionChecker(uow_factory)
            ),
        ]
    )
    health = HealthResource()
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/permissions", PermissionCatalogResource(catalog))
    app.add_route(
        "/v1/roles",
        RolesResource(ListRolesUseCase(uow_factory), CreateRoleUseCase(uow_factory, catalog)),
    )
    app.add_route(
        "/v1/roles/{role_id}",
        RoleResource(
            GetRoleUseCase(uow_factory),
            RenameRoleUseCase(uow_factory),
            DeleteRoleUseCase(uow_factory),
        ),
    )
    app.add_route(
        "/v1/roles/{role_id}/permissions",
        RolePermissionsResource(SetRolePermissionsUseCase(uow_factory, catalog)),
    )
    app.add_route("/v1/me/access", AccessResource(views))
    app.add_route("/v1/views/{view_id:path}", ViewAccessResource(views))
    app.add_route(
        "/v1/directory/config",
        DirectoryConfigResource(get_config, SaveDirectoryConfigUseCase(uow_factory)),
    )
    app.add_route(
        "/v1/directory/sync",
        DirectorySyncResource(SyncDirectoryUsersUseCase(get_config, fake_directory, provision)),
    )
    return app


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
