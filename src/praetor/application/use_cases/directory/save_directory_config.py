"""Save directory configuration use case."""

import logging

from praetor.domain.entities import DirectoryConfig
from praetor.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

_REQUIRED_WHEN_ENABLED = (
    ("server_url", "serverUrl"),
    ("base_dn", "baseDn"),
    ("user_filter", "userFilter"),
    ("group_base_dn", "groupBaseDn"),
    ("group_filter", "groupFilter"),
)


class SaveDirectoryConfigUseCase:
    """Validate and store the directory configuration.

    Dangling role references are rejected here, so resolution at login time
    never has to deal with them.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, config: DirectoryConfig) -> DirectoryConfig:
        if config.enabled:
            for attr, label in _REQUIRED_WHEN_ENABLED:
                if not (getattr(config, attr) or "").strip():
                    raise ValidationError(f"{label} is required")

        if bool(config.bind_dn) != bool(config.bind_password):
            raise ValidationError(
                "bindDn and bindPassword must be provided together or not at all"
            )

        for i, mapping in enumerate(config.role_mappings):
            if not mapping.external_group.strip():
                raise ValidationError(f"roleMappings[{i}].ldapGroup is required")

        async with self._uow_factory() as uow:
            for i, mapping in enumerate(config.role_mappings):
                if not await uow.roles.get_by_id(mapping.role_id):
                    raise ValidationError(
                        f"roleMappings[{i}].role references unknown role: {mapping.role_id}"
                    )
            if not await uow.roles.get_by_id(config.default_role_id):
                raise ValidationError(f"Unknown default role: {config.default_role_id}")
            saved = await uow.directory_config.save(config)

        logger.info(
            "directory.config.saved",
            extra={"enabled": saved.enabled, "mapping_count": len(saved.role_mappings)},
        )
        return saved
