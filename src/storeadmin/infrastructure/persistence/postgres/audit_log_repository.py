"""PostgreSQL audit log repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from storeadmin.domain.entities import AuditLogEntry

_COLUMNS = "id, user_id, action, resource, record_id, record_title, details, created_at"


def _row_to_entry(r: tuple) -> AuditLogEntry:
    return AuditLogEntry(
        id=r[0],
        user_id=r[1],
        action=r[2],
        resource=r[3],
        record_id=r[4],
        record_title=r[5],
        details=r[6],
        created_at=r[7],
    )


class PostgresAuditLogRepository:
    """Audit log repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, entry: AuditLogEntry) -> AuditLogEntry:
        """Create audit log entry."""
        await self._conn.execute(
            f"INSERT INTO audit_log ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                entry.id,
                entry.user_id,
                entry.action,
                entry.resource,
                entry.record_id,
                entry.record_title,
                entry.details,
                entry.created_at,
            ),
        )
        return entry

    async def list(
        self,
        *,
        resource: str | None = None,
        cursor: str | None = None,
        limit: int = 50,
    ) -> tuple[list[AuditLogEntry], str | None]:
        """List entries newest first. cursor is the id of the last entry of the previous page."""
        conditions = []
        params: list = []
        if resource:
            conditions.append("resource = %s")
            params.append(resource)
        if cursor:
            try:
                cursor_id = UUID(cursor)
            except ValueError:
                cursor_id = None
            if cursor_id:
                conditions.append(
                    "(created_at, id) < (SELECT created_at, id FROM audit_log WHERE id = %s)"
                )
                params.append(cursor_id)
        where = f"WHERE {' AND '.join(conditions)}" if conditions else ""
        params.append(limit + 1)
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM audit_log {where} "
            "ORDER BY created_at DESC, id DESC LIMIT %s",
            params,
        )
        rows = await cur.fetchall()
        items = [_row_to_entry(r) for r in rows[:limit]]
        next_cursor = str(items[-1].id) if len(rows) > limit else None
        return (items, next_cursor)
