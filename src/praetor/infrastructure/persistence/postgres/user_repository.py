"""PostgreSQL user repository implementation."""

from psycopg import AsyncConnection

from praetor.domain.entities import User, UserSource


class PostgresUserRepository:
    """User repository implementation (role assignment only)."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_username(self, username: str) -> User | None:
        """Get user by username."""
        cur = await self._conn.execute(
            "SELECT id, username, name, role_id, source, created_at "
            "FROM app_user WHERE username = %s",
            (username,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return User(
            id=r[0],
            username=r[1],
            name=r[2],
            role_id=r[3],
            source=UserSource(r[4]),
            created_at=r[5],
        )

    async def create(self, user: User) -> User:
        """Create user."""
        await self._conn.execute(
            "INSERT INTO app_user (id, username, name, role_id, source, created_at) "
            "VALUES (%s, %s, %s, %s, %s, %s)",
            (
                user.id,
                user.username,
                user.name,
                user.role_id,
                user.source.value,
                user.created_at,
            ),
        )
        return user

    async def update(self, user: User) -> None:
        """Update name and role."""
        await self._conn.execute(
            "UPDATE app_user SET name = %s, role_id = %s WHERE id = %s",
            (user.name, user.role_id, user.id),
        )

    async def count_by_role(self, role_id: str) -> int:
        """Number of users assigned to role."""
        cur = await self._conn.execute(
            "SELECT count(*) FROM app_user WHERE role_id = %s",
            (role_id,),
        )
        r = await cur.fetchone()
        return int(r[0]) if r else 0
