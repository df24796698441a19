"""Provision a directory user - assign a role on first sight."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from uuid import uuid4

from praetor.domain.entities import DirectoryConfig, DirectoryUser, User, UserSource
from praetor.domain.provisioning import resolve_role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProvisioningResult:
    """User after provisioning and whether it was created by this call."""

    user: User
    created: bool


class ProvisionDirectoryUserUseCase:
    """Create or refresh the local user for an authenticated directory user.

    New users get the role resolved from their groups. Existing users keep
    their current role; only the display name is refreshed.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        directory_user: DirectoryUser,
        source: UserSource = UserSource.LDAP,
    ) -> ProvisioningResult:
        async with self._uow_factory() as uow:
            existing = await uow.users.get_by_username(directory_user.username)
            if existing:
                if directory_user.name and existing.name != directory_user.name:
                    existing = replace(existing, name=directory_user.name)
                    await uow.users.update(existing)
                return ProvisioningResult(user=existing, created=False)

            config = await uow.directory_config.get() or DirectoryConfig()
            role_id = resolve_role(
                directory_user.groups, config.role_mappings, config.default_role_id
            )
            user = User(
                id=uuid4(),
                username=directory_user.username,
                name=directory_user.name or directory_user.username,
                role_id=role_id,
                source=source,
                created_at=datetime.now(UTC),
            )
            await uow.users.create(user)

        logger.info(
            "directory.user.provisioned",
            extra={"username": user.username, "role_id": role_id, "source": str(source)},
        )
        return ProvisioningResult(user=user, created=True)
