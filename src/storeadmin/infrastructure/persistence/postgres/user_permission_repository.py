"""PostgreSQL user permission override repository implementation."""

import psycopg
from psycopg import AsyncConnection

from storeadmin.domain.entities import UserPermissionEntry
from storeadmin.domain.exceptions import MatrixUnavailable


class PostgresUserPermissionRepository:
    """User permission override repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_for_user(self, user_id: str) -> list[UserPermissionEntry]:
        """List override cells for user."""
        try:
            cur = await self._conn.execute(
                "SELECT user_id, resource, action, allowed FROM user_permission WHERE user_id = %s",
                (user_id,),
            )
            rows = await cur.fetchall()
        except psycopg.Error as e:
            raise MatrixUnavailable(f"Overrides of {user_id} could not be read") from e
        return [
            UserPermissionEntry(user_id=r[0], resource=r[1], action=r[2], allowed=r[3])
            for r in rows
        ]

    async def replace_for_user(self, user_id: str, entries: list[UserPermissionEntry]) -> None:
        """Replace all override cells for user."""
        await self.delete_for_user(user_id)
        if not entries:
            return
        async with self._conn.cursor() as cur:
            await cur.executemany(
                "INSERT INTO user_permission (user_id, resource, action, allowed) "
                "VALUES (%s, %s, %s, %s)",
                [(user_id, e.resource, e.action, e.allowed) for e in entries],
            )

    async def delete_for_user(self, user_id: str) -> None:
        """Delete all override cells for user."""
        await self._conn.execute(
            "DELETE FROM user_permission WHERE user_id = %s",
            (user_id,),
        )
