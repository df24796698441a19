"""Roles API resources."""

import falcon
import falcon.asgi

from praetor.application.use_cases.role import (
    CreateRoleUseCase,
    DeleteRoleUseCase,
    GetRoleUseCase,
    ListRolesUseCase,
    RenameRoleUseCase,
    SetRolePermissionsUseCase,
)
from praetor.domain.exceptions import PraetorError, ValidationError
from praetor.interfaces.api.errors import set_error
from praetor.interfaces.api.hooks import require_permission

ROLES_VIEW = "administration.roles.view"
ROLES_CREATE = "administration.roles.create"
ROLES_UPDATE = "administration.roles.update"
ROLES_DELETE = "administration.roles.delete"


def _string_list(value: object, field: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValidationError(f"{field} must be an array of strings")
    return value


async def _json_body(req: falcon.asgi.Request) -> dict:
    body = await req.get_media(default_when_empty={})
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


class RolesResource:
    """GET/POST /v1/roles - list and create roles."""

    def __init__(self, list_roles: ListRolesUseCase, create_role: CreateRoleUseCase) -> None:
        self._list = list_roles
        self._create = create_role

    @falcon.before(require_permission(ROLES_VIEW))
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List roles sorted by name."""
        roles = await self._list.execute()
        resp.media = [r.to_dict() for r in roles]
        resp.status = falcon.HTTP_200

    @falcon.before(require_permission(ROLES_CREATE))
    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create role from ``{"name", "permissions"}``."""
        try:
            body = await _json_body(req)
            role = await self._create.execute(
                body.get("name"),
                _string_list(body.get("permissions"), "permissions"),
            )
        except PraetorError as e:
            set_error(resp, e)
            return
        resp.media = role.to_dict()
        resp.status = falcon.HTTP_201


class RoleResource:
    """GET/PUT/DELETE /v1/roles/{role_id} - fetch, rename and delete."""

    def __init__(
        self,
        get_role: GetRoleUseCase,
        rename_role: RenameRoleUseCase,
        delete_role: DeleteRoleUseCase,
    ) -> None:
        self._get = get_role
        self._rename = rename_role
        self._delete = delete_role

    @falcon.before(require_permission(ROLES_VIEW))
    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        try:
            role = await self._get.execute(role_id)
        except PraetorError as e:
            set_error(resp, e)
            return
        resp.media = role.to_dict()
        resp.status = falcon.HTTP_200

    @falcon.before(require_permission(ROLES_UPDATE))
    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        """Rename role from ``{"name"}``."""
        try:
            body = await _json_body(req)
            role = await self._rename.execute(role_id, body.get("name"))
        except PraetorError as e:
            set_error(resp, e)
            return
        resp.media = role.to_dict()
        resp.status = falcon.HTTP_200

    @falcon.before(require_permission(ROLES_DELETE))
    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        try:
            await self._delete.execute(role_id)
        except PraetorError as e:
            set_error(resp, e)
            return
        resp.media = {"message": "Role deleted"}
        resp.status = falcon.HTTP_200


class RolePermissionsResource:
    """PUT /v1/roles/{role_id}/permissions - replace the permission set."""

    def __init__(self, set_permissions: SetRolePermissionsUseCase) -> None:
        self._set_permissions = set_permissions

    @falcon.before(require_permission(ROLES_UPDATE))
    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        try:
            body = await _json_body(req)
            if "permissions" not in body:
                raise ValidationError("permissions is required")
            role = await self._set_permissions.execute(
                role_id, _string_list(body["permissions"], "permissions")
            )
        except PraetorError as e:
            set_error(resp, e)
            return
        resp.media = role.to_dict()
        resp.status = falcon.HTTP_200
