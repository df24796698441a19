"""Directory configuration repository port."""

from typing import Protocol

from praetor.domain.entities import DirectoryConfig


class DirectoryConfigRepository(Protocol):
    """Port for the single-row directory configuration."""

    async def get(self) -> DirectoryConfig | None: ...

    async def save(self, config: DirectoryConfig) -> DirectoryConfig: ...
