"""PostgreSQL role permission repository implementation."""

import psycopg
from psycopg import AsyncConnection

from storeadmin.domain.entities import RolePermissionEntry
from storeadmin.domain.exceptions import MatrixUnavailable
from storeadmin.domain.value_objects import Role


class PostgresRolePermissionRepository:
    """Role permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_all(self) -> list[RolePermissionEntry]:
        """List stored role permission cells."""
        try:
            cur = await self._conn.execute(
                "SELECT role, resource, action, allowed FROM role_permission"
            )
            rows = await cur.fetchall()
        except psycopg.Error as e:
            raise MatrixUnavailable("Role permissions could not be read") from e
        return [
            RolePermissionEntry(role=Role(r[0]), resource=r[1], action=r[2], allowed=r[3])
            for r in rows
        ]

    async def replace_for_role(self, role: Role, entries: list[RolePermissionEntry]) -> None:
        """Replace all stored cells of role."""
        await self._conn.execute(
            "DELETE FROM role_permission WHERE role = %s",
            (role.value,),
        )
        if not entries:
            return
        async with self._conn.cursor() as cur:
            await cur.executemany(
                "INSERT INTO role_permission (role, resource, action, allowed) "
                "VALUES (%s, %s, %s, %s)",
                [(role.value, e.resource, e.action, e.allowed) for e in entries],
            )
