"""PostgreSQL user repository implementation."""

from psycopg import AsyncConnection

from storeadmin.domain.entities import User
from storeadmin.domain.value_objects import Role

_COLUMNS = "id, email, name, role, birth_date"


def _row_to_user(r: tuple) -> User:
    return User(id=r[0], email=r[1], name=r[2], role=Role(r[3]), birth_date=r[4])


class PostgresUserRepository:
    """User repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: str) -> User | None:
        """Get user by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_user(r)

    async def list_all(self) -> list[User]:
        """List all users."""
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM app_user ORDER BY id")
        rows = await cur.fetchall()
        return [_row_to_user(r) for r in rows]

    async def list_with_birth_date(self) -> list[User]:
        """List users that have a birth date set."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE birth_date IS NOT NULL ORDER BY id"
        )
        rows = await cur.fetchall()
        return [_row_to_user(r) for r in rows]
