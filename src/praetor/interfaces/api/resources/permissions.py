"""Permission catalog API resource."""

import falcon
import falcon.asgi

from praetor.domain.catalog import PermissionCatalog
from praetor.domain.codec import build_permissions, format_permission_label
from praetor.interfaces.api.hooks import require_permission


class PermissionCatalogResource:
    """GET /v1/permissions - catalog grouped by module, for the role editor."""

    def __init__(self, catalog: PermissionCatalog) -> None:
        self._catalog = catalog

    @falcon.before(require_permission("administration.roles.view"))
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        modules = []
        for module, definitions in self._catalog.definitions_by_module().items():
            modules.append({
                "id": module,
                "alwaysGranted": module in self._catalog.always_visible_modules,
                "resources": [
                    {
                        "id": d.resource,
                        "label": format_permission_label(d.resource),
                        "isScope": d.is_scope,
                        "actions": [str(a) for a in d.actions],
                        "permissions": build_permissions(d.resource, d.actions),
                    }
                    for d in definitions
                ],
            })
        resp.media = {"modules": modules}
        resp.status = falcon.HTTP_200
