"""Get directory configuration use case."""

from praetor.domain.entities import DirectoryConfig


class GetDirectoryConfigUseCase:
    """Stored configuration, or the defaults when nothing was saved yet."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> DirectoryConfig:
        async with self._uow_factory() as uow:
            config = await uow.directory_config.get()
        return config or DirectoryConfig()
