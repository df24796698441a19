"""PostgreSQL directory configuration repository implementation."""

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from praetor.domain.entities import DirectoryConfig, GroupRoleMapping

_COLUMNS = (
    "enabled, server_url, base_dn, bind_dn, bind_password, user_filter, "
    "group_base_dn, group_filter, role_mappings, default_role_id"
)


class PostgresDirectoryConfigRepository:
    """Single-row (id = 1) directory configuration."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self) -> DirectoryConfig | None:
        """Get stored configuration."""
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM directory_config WHERE id = 1")
        r = await cur.fetchone()
        if not r:
            return None
        return DirectoryConfig(
            enabled=r[0],
            server_url=r[1],
            base_dn=r[2],
            bind_dn=r[3],
            bind_password=r[4],
            user_filter=r[5],
            group_base_dn=r[6],
            group_filter=r[7],
            role_mappings=[GroupRoleMapping.from_dict(m) for m in (r[8] or [])],
            default_role_id=r[9],
        )

    async def save(self, config: DirectoryConfig) -> DirectoryConfig:
        """Upsert configuration. Mapping order is preserved in the JSON array."""
        await self._conn.execute(
            f"""
            INSERT INTO directory_config (id, {_COLUMNS}, updated_at)
            VALUES (1, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, now())
            ON CONFLICT (id) DO UPDATE SET
                enabled = EXCLUDED.enabled,
                server_url = EXCLUDED.server_url,
                base_dn = EXCLUDED.base_dn,
                bind_dn = EXCLUDED.bind_dn,
                bind_password = EXCLUDED.bind_password,
                user_filter = EXCLUDED.user_filter,
                group_base_dn = EXCLUDED.group_base_dn,
                group_filter = EXCLUDED.group_filter,
                role_mappings = EXCLUDED.role_mappings,
                default_role_id = EXCLUDED.default_role_id,
                updated_at = now()
            """,
            (
                config.enabled,
                config.server_url,
                config.base_dn,
                config.bind_dn,
                config.bind_password,
                config.user_filter,
                config.group_base_dn,
                config.group_filter,
                Jsonb([m.to_dict() for m in config.role_mappings]),
                config.default_role_id,
            ),
        )
        return config
