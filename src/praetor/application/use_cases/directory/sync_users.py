"""Synchronise every directory user into the local user table."""

import logging
from typing import Any

from praetor.application.ports import Directory
from praetor.application.use_cases.directory.get_directory_config import (
    GetDirectoryConfigUseCase,
)
from praetor.application.use_cases.directory.provision_user import (
    ProvisionDirectoryUserUseCase,
)
from praetor.domain.entities import UserSource

logger = logging.getLogger(__name__)


class SyncDirectoryUsersUseCase:
    """Provision all users the directory lists."""

    def __init__(
        self,
        get_config: GetDirectoryConfigUseCase,
        directory: Directory,
        provision: ProvisionDirectoryUserUseCase,
    ) -> None:
        self._get_config = get_config
        self._directory = directory
        self._provision = provision

    async def execute(self) -> dict[str, Any]:
        config = await self._get_config.execute()
        if not config.enabled:
            logger.info("directory.sync.skipped")
            return {"skipped": True, "reason": "LDAP is disabled"}

        users = await self._directory.list_users(config)
        synced = created = 0
        for directory_user in users:
            result = await self._provision.execute(directory_user, UserSource.LDAP)
            if result.created:
                created += 1
            else:
                synced += 1

        logger.info(
            "directory.sync.complete",
            extra={"found_count": len(users), "synced_count": synced, "created_count": created},
        )
        return {"synced": synced, "created": created}
