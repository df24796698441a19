"""Directory (LDAP) configuration and sync resources."""

from dataclasses import replace

import falcon
import falcon.asgi

from praetor.application.use_cases.directory import (
    GetDirectoryConfigUseCase,
    SaveDirectoryConfigUseCase,
    SyncDirectoryUsersUseCase,
)
from praetor.domain.entities import DirectoryConfig, GroupRoleMapping
from praetor.domain.exceptions import PraetorError, ValidationError
from praetor.interfaces.api.errors import set_error
from praetor.interfaces.api.hooks import require_permission

AUTH_VIEW = "administration.authentication.view"
AUTH_UPDATE = "administration.authentication.update"

_STRING_FIELDS = (
    ("serverUrl", "server_url"),
    ("baseDn", "base_dn"),
    ("bindDn", "bind_dn"),
    ("bindPassword", "bind_password"),
    ("userFilter", "user_filter"),
    ("groupBaseDn", "group_base_dn"),
    ("groupFilter", "group_filter"),
    ("defaultRole", "default_role_id"),
)


def _parse_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    raise ValidationError("enabled must be a boolean")


def _parse_mappings(value: object) -> list[GroupRoleMapping]:
    if not isinstance(value, list):
        raise ValidationError("roleMappings must be an array")
    mappings = []
    for i, item in enumerate(value):
        if not isinstance(item, dict):
            raise ValidationError(f"roleMappings[{i}] must be an object")
        mappings.append(GroupRoleMapping.from_dict(item))
    return mappings


def merge_config(current: DirectoryConfig, body: dict) -> DirectoryConfig:
    """Apply a partial update; absent or null fields keep their stored value.

    GET never returns the bind password, so an empty ``bindPassword`` keeps
    the stored one. Clearing ``bindDn`` clears the password with it.
    """
    changes: dict = {}
    if body.get("enabled") is not None:
        changes["enabled"] = _parse_bool(body["enabled"])
    for key, attr in _STRING_FIELDS:
        value = body.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ValidationError(f"{key} must be a string")
        if attr == "bind_password" and not value:
            continue
        changes[attr] = value
    if changes.get("bind_dn") == "":
        changes["bind_password"] = ""
    if body.get("roleMappings") is not None:
        changes["role_mappings"] = _parse_mappings(body["roleMappings"])
    return replace(current, **changes)


def _public(config: DirectoryConfig) -> dict:
    data = config.to_dict()
    data["hasBindPassword"] = bool(config.bind_password)
    data["bindPassword"] = ""
    return data


class DirectoryConfigResource:
    """GET/PUT /v1/directory/config - LDAP settings and group -> role mappings."""

    def __init__(
        self,
        get_config: GetDirectoryConfigUseCase,
        save_config: SaveDirectoryConfigUseCase,
    ) -> None:
        self._get = get_config
        self._save = save_config

    @falcon.before(require_permission(AUTH_VIEW))
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """The bind password is never returned."""
        config = await self._get.execute()
        resp.media = _public(config)
        resp.status = falcon.HTTP_200

    @falcon.before(require_permission(AUTH_UPDATE))
    async def on_put(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            body = await req.get_media(default_when_empty={})
            if not isinstance(body, dict):
                raise ValidationError("Request body must be a JSON object")
            current = await self._get.execute()
            saved = await self._save.execute(merge_config(current, body))
        except PraetorError as e:
            set_error(resp, e)
            return
        resp.media = _public(saved)
        resp.status = falcon.HTTP_200


class DirectorySyncResource:
    """POST /v1/directory/sync - provision every directory user."""

    def __init__(self, sync_users: SyncDirectoryUsersUseCase) -> None:
        self._sync = sync_users

    @falcon.before(require_permission(AUTH_UPDATE))
    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            stats = await self._sync.execute()
        except PraetorError as e:
            set_error(resp, e)
            return
        resp.media = {"success": True, **stats}
        resp.status = falcon.HTTP_200
