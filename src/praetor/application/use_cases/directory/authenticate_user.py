"""Authenticate a user against the directory and provision it."""

import logging

from praetor.application.ports import Directory
from praetor.application.use_cases.directory.get_directory_config import (
    GetDirectoryConfigUseCase,
)
from praetor.application.use_cases.directory.provision_user import (
    ProvisionDirectoryUserUseCase,
    ProvisioningResult,
)
from praetor.domain.entities import UserSource

logger = logging.getLogger(__name__)


class AuthenticateDirectoryUserUseCase:
    """Credential check is delegated to the directory; no session is issued."""

    def __init__(
        self,
        get_config: GetDirectoryConfigUseCase,
        directory: Directory,
        provision: ProvisionDirectoryUserUseCase,
    ) -> None:
        self._get_config = get_config
        self._directory = directory
        self._provision = provision

    async def execute(self, username: str, password: str) -> ProvisioningResult | None:
        config = await self._get_config.execute()
        if not config.enabled:
            return None
        if not username or not password:
            return None
        directory_user = await self._directory.authenticate(config, username, password)
        if directory_user is None:
            logger.info("directory.auth.rejected", extra={"username": username})
            return None
        return await self._provision.execute(directory_user, UserSource.LDAP)
