"""Auth middleware - resolves the caller's role and permissions."""

import logging
from dataclasses import dataclass, field

import falcon.asgi

from praetor.application.ports import PermissionChecker
from praetor.application.use_cases.directory import ProvisionDirectoryUserUseCase
from praetor.domain.entities import DirectoryUser, UserSource

logger = logging.getLogger(__name__)


@dataclass
class RequestUser:
    """User from request context with the permission set of its role."""

    user_id: str
    username: str | None = None
    email: str | None = None
    role_id: str | None = None
    permissions: frozenset[str] = field(default_factory=frozenset)


class AuthMiddleware:
    """Validates bearer tokens and sets ``req.context.user``.

    OIDC users are provisioned on first sight from their token groups.
    Requests without a token get an anonymous user holding no permissions;
    an invalid token leaves ``req.context.user`` as None.
    """

    def __init__(
        self,
        keycloak_provider=None,
        provision_user: ProvisionDirectoryUserUseCase | None = None,
        permission_checker: PermissionChecker | None = None,
    ) -> None:
        self._keycloak = keycloak_provider
        self._provision = provision_user
        self._permission_checker = permission_checker

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from Authorization header."""
        auth = req.get_header("Authorization")
        if not (auth and auth.startswith("Bearer ")):
            req.context.user = RequestUser(user_id="anonymous")
            return

        req.context.user = None
        if not (self._keycloak and self._provision and self._permission_checker):
            return
        oidc_user = self._keycloak.decode_token(auth[7:])
        if not oidc_user:
            return

        username = oidc_user.username or oidc_user.user_id
        result = await self._provision.execute(
            DirectoryUser(
                username=username,
                name=oidc_user.name or username,
                groups=oidc_user.groups,
            ),
            UserSource.OIDC,
        )
        role_id = result.user.role_id
        req.context.user = RequestUser(
            user_id=oidc_user.user_id,
            username=username,
            email=oidc_user.email,
            role_id=role_id,
            permissions=await self._permission_checker.permissions_for(role_id),
        )
