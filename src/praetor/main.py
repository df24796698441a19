"""Application entry point and composition root."""

import logging

import falcon
import falcon.asgi

from praetor import __version__
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
    SeedSystemRolesUseCase,
    SetRolePermissionsUseCase,
)
from praetor.config import Settings, get_settings
from praetor.domain.catalog import build_default_catalog
from praetor.domain.routes import build_view_permission_map
from praetor.infrastructure.auth.keycloak_provider import KeycloakProvider
from praetor.infrastructure.directory.ldap_directory import LdapDirectory
from praetor.infrastructure.permission.permission_checker import RolePermissionChecker
from praetor.infrastructure.persistence.postgres.connection import create_pool
from praetor.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from praetor.interfaces.api.middleware.auth import AuthMiddleware
from praetor.interfaces.api.middleware.cors import CORSMiddleware
from praetor.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
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
from praetor.logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def _handle_unexpected(req, resp, ex, params) -> None:
    logger.exception(
        "request.failed",
        extra={"method": req.method, "path": req.path},
    )
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Internal server error"}


def _cors_origins(settings: Settings) -> list[str]:
    return [o.strip() for o in settings.cors_origins.split(",") if o.strip()]


def create_praetor_app(settings: Settings | None = None) -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    setup_logging(settings)

    catalog = build_default_catalog()
    view_map = build_view_permission_map()

    pool = create_pool(
        settings.database_url,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("auth.keycloak.disabled")

    directory = LdapDirectory(
        reject_unauthorized=settings.ldap_reject_unauthorized,
        ca_file=settings.ldap_tls_ca_file,
        timeout=settings.ldap_timeout_seconds,
    )
    permission_checker = RolePermissionChecker(uow_factory)

    # Roles
    list_roles = ListRolesUseCase(unit_of_work_factory=uow_factory)
    get_role = GetRoleUseCase(unit_of_work_factory=uow_factory)
    create_role = CreateRoleUseCase(
        unit_of_work_factory=uow_factory,
        catalog=catalog,
        strict_permissions=settings.strict_permissions,
    )
    rename_role = RenameRoleUseCase(unit_of_work_factory=uow_factory)
    set_permissions = SetRolePermissionsUseCase(
        unit_of_work_factory=uow_factory,
        catalog=catalog,
        strict_permissions=settings.strict_permissions,
    )
    delete_role = DeleteRoleUseCase(unit_of_work_factory=uow_factory)
    seed_roles = SeedSystemRolesUseCase(unit_of_work_factory=uow_factory, catalog=catalog)

    # Directory
    get_config = GetDirectoryConfigUseCase(unit_of_work_factory=uow_factory)
    save_config = SaveDirectoryConfigUseCase(unit_of_work_factory=uow_factory)
    provision_user = ProvisionDirectoryUserUseCase(unit_of_work_factory=uow_factory)
    sync_users = SyncDirectoryUsersUseCase(
        get_config=get_config,
        directory=directory,
        provision=provision_user,
    )

    health_resource = HealthResource(pool)
    app = falcon.asgi.App(
        middleware=[
            CORSMiddleware(_cors_origins(settings)),
            PoolLifespanMiddleware(pool, seed_roles),
            AuthMiddleware(keycloak, provision_user, permission_checker),
        ],
    )
    app.add_error_handler(Exception, _handle_unexpected)

    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/permissions", PermissionCatalogResource(catalog))
    app.add_route("/v1/roles", RolesResource(list_roles, create_role))
    app.add_route("/v1/roles/{role_id}", RoleResource(get_role, rename_role, delete_role))
    app.add_route("/v1/roles/{role_id}/permissions", RolePermissionsResource(set_permissions))
    app.add_route("/v1/me/access", AccessResource(view_map))
    app.add_route("/v1/views/{view_id:path}", ViewAccessResource(view_map))
    app.add_route("/v1/directory/config", DirectoryConfigResource(get_config, save_config))
    app.add_route("/v1/directory/sync", DirectorySyncResource(sync_users))

    logger.info(
        "app.created",
        extra={"version": __version__, "environment": settings.environment},
    )
    return app


def main() -> None:
    """CLI entry point - serve the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        create_praetor_app(settings),
        host="0.0.0.0",
        port=8000,
        log_config=None,
    )
