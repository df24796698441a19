"""Falcon ``before`` hooks that gate responders on granted permissions."""

import logging

import falcon

from praetor.domain.authorization import has_all_permissions, has_any_permission

logger = logging.getLogger(__name__)


def _current_user(req):
    user = getattr(req.context, "user", None)
    if user is None:
        raise falcon.HTTPUnauthorized(title="Authentication required")
    return user


def _deny(req, user, required) -> None:
    logger.info(
        "access.denied",
        extra={"user_id": user.user_id, "path": req.path, "required": list(required)},
    )
    raise falcon.HTTPForbidden(title="Insufficient permissions")


def require_permission(*permissions: str):
    """Every listed permission must be granted."""

    async def hook(req, resp, resource, params) -> None:
        user = _current_user(req)
        if not has_all_permissions(user.permissions, permissions):
            _deny(req, user, permissions)

    return hook


def require_any_permission(*permissions: str):
    """At least one listed permission must be granted."""

    async def hook(req, resp, resource, params) -> None:
        user = _current_user(req)
        if not has_any_permission(user.permissions, permissions):
            _deny(req, user, permissions)

    return hook
