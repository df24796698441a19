"""Access resources - what the current user may see and do."""

from collections.abc import Mapping

import falcon
import falcon.asgi

from praetor.domain.authorization import can_access_view, resolve_visible_views


class AccessResource:
    """GET /v1/me/access - granted permissions and visible views (navigation)."""

    def __init__(self, view_permission_map: Mapping[str, str]) -> None:
        self._views = view_permission_map

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        resp.media = {
            "userId": user.user_id,
            "roleId": user.role_id,
            "permissions": sorted(user.permissions),
            "views": sorted(resolve_visible_views(user.permissions, self._views)),
        }
        resp.status = falcon.HTTP_200


class ViewAccessResource:
    """GET /v1/views/{view_id} - route gate: 204 allowed, 403 denied, 404 unknown."""

    def __init__(self, view_permission_map: Mapping[str, str]) -> None:
        self._views = view_permission_map

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, view_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return
        if view_id not in self._views:
            resp.status = falcon.HTTP_404
            resp.media = {"error": f"Unknown view: {view_id}"}
            return
        if not can_access_view(user.permissions, view_id, self._views):
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied", "required": self._views[view_id]}
            return
        resp.status = falcon.HTTP_204
