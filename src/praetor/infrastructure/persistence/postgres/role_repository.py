"""PostgreSQL role repository implementation."""

from psycopg import AsyncConnection, errors

from praetor.domain.entities import Role
from praetor.domain.exceptions import ConflictError, RoleInUse

_ROLE_COLUMNS = "id, name, is_system, is_admin"


class PostgresRoleRepository:
    """Role repository implementation. Permissions live in role_permission."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def _permissions(self, role_id: str) -> frozenset[str]:
        cur = await self._conn.execute(
            "SELECT permission FROM role_permission WHERE role_id = %s",
            (role_id,),
        )
        rows = await cur.fetchall()
        return frozenset(r[0] for r in rows)

    async def _to_role(self, r: tuple) -> Role:
        return Role(
            id=r[0],
            name=r[1],
            permissions=await self._permissions(r[0]),
            is_system=r[2],
            is_admin=r[3],
        )

    async def get_by_id(self, role_id: str) -> Role | None:
        """Get role by id."""
        cur = await self._conn.execute(
            f"SELECT {_ROLE_COLUMNS} FROM role WHERE id = %s",
            (role_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return await self._to_role(r)

    async def get_by_name(self, name: str) -> Role | None:
        """Get role by name (case-sensitive)."""
        cur = await self._conn.execute(
            f"SELECT {_ROLE_COLUMNS} FROM role WHERE name = %s",
            (name,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return await self._to_role(r)

    async def list_all(self) -> list[Role]:
        """List all roles."""
        cur = await self._conn.execute(f"SELECT {_ROLE_COLUMNS} FROM role")
        rows = await cur.fetchall()
        return [await self._to_role(r) for r in rows]

    async def _replace_permissions(self, role: Role) -> None:
        await self._conn.execute(
            "DELETE FROM role_permission WHERE role_id = %s",
            (role.id,),
        )
        if role.permissions:
            async with self._conn.cursor() as cur:
                await cur.executemany(
                    "INSERT INTO role_permission (role_id, permission) VALUES (%s, %s) "
                    "ON CONFLICT DO NOTHING",
                    [(role.id, p) for p in sorted(role.permissions)],
                )

    async def create(self, role: Role) -> Role:
        """Insert role and its permissions."""
        try:
            await self._conn.execute(
                "INSERT INTO role (id, name, is_system, is_admin) VALUES (%s, %s, %s, %s)",
                (role.id, role.name, role.is_system, role.is_admin),
            )
        except errors.UniqueViolation as e:
            raise ConflictError(f"Role already exists: {role.name}") from e
        await self._replace_permissions(role)
        return role

    async def update(self, role: Role) -> Role:
        """Update name and replace the full permission set."""
        try:
            await self._conn.execute(
                "UPDATE role SET name = %s, updated_at = now() WHERE id = %s",
                (role.name, role.id),
            )
        except errors.UniqueViolation as e:
            raise ConflictError(f"Role already exists: {role.name}") from e
        await self._replace_permissions(role)
        return role

    async def delete(self, role_id: str) -> None:
        """Delete role. app_user.role_id has no cascade, so assigned roles fail."""
        try:
            await self._conn.execute("DELETE FROM role WHERE id = %s", (role_id,))
        except errors.ForeignKeyViolation as e:
            raise RoleInUse(role_id) from e
