"""Pool lifespan middleware - opens pool and seeds system roles on startup."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

from praetor.application.use_cases.role import SeedSystemRolesUseCase

logger = logging.getLogger(__name__)


class PoolLifespanMiddleware:
    """Opens the connection pool on startup and closes it on shutdown."""

    def __init__(
        self,
        pool: AsyncConnectionPool,
        seed_roles: SeedSystemRolesUseCase | None = None,
    ) -> None:
        self._pool = pool
        self._seed_roles = seed_roles

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Open pool, then make sure the shipped roles exist."""
        await self._pool.open()
        logger.info("database.pool.opened")
        if self._seed_roles:
            await self._seed_roles.execute()

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close pool when ASGI server shuts down."""
        await self._pool.close()
        logger.info("database.pool.closed")
