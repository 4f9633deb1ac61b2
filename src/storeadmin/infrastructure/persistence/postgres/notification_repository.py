"""PostgreSQL notification and template send log repositories."""

from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection

from storeadmin.domain.entities import Notification, TemplateSendLog

_COLUMNS = (
    "id, user_id, type, title, message, created_at, link, coupon_id, read, reminder_sent_at"
)


class PostgresNotificationRepository:
    """Notification repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, notification: Notification) -> Notification:
        """Create notification."""
        n = notification
        await self._conn.execute(
            f"INSERT INTO notification ({_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                n.id,
                n.user_id,
                n.type,
                n.title,
                n.message,
                n.created_at,
                n.link,
                n.coupon_id,
                n.read,
                n.reminder_sent_at,
            ),
        )
        return notification

    async def list_reminder_candidates(self, types: tuple[str, ...]) -> list[Notification]:
        """Read, not yet reminded notifications of types that carry a coupon."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM notification "
            "WHERE coupon_id IS NOT NULL AND read AND reminder_sent_at IS NULL "
            "AND type = ANY(%s)",
            (list(types),),
        )
        rows = await cur.fetchall()
        return [
            Notification(
                id=r[0],
                user_id=r[1],
                type=r[2],
                title=r[3],
                message=r[4],
                created_at=r[5],
                link=r[6],
                coupon_id=r[7],
                read=r[8],
                reminder_sent_at=r[9],
            )
            for r in rows
        ]

    async def mark_reminded(self, notification_id: UUID, at: datetime) -> None:
        """Set reminder_sent_at on notification."""
        await self._conn.execute(
            "UPDATE notification SET reminder_sent_at = %s WHERE id = %s",
            (at, notification_id),
        )


class PostgresTemplateSendLogRepository:
    """Template send log repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def exists_for_template(self, template_id: UUID) -> bool:
        """Whether template has ever been sent."""
        cur = await self._conn.execute(
            "SELECT 1 FROM template_send_log WHERE template_id = %s LIMIT 1",
            (template_id,),
        )
        return await cur.fetchone() is not None

    async def user_ids_for_year(self, template_id: UUID, year: int) -> set[str]:
        """Users already sent template in year."""
        cur = await self._conn.execute(
            "SELECT user_id FROM template_send_log WHERE template_id = %s AND year = %s",
            (template_id, year),
        )
        rows = await cur.fetchall()
        return {r[0] for r in rows}

    async def create(self, log: TemplateSendLog) -> TemplateSendLog:
        """Create send log entry."""
        await self._conn.execute(
            "INSERT INTO template_send_log (template_id, user_id, year, coupon_id) "
            "VALUES (%s, %s, %s, %s)",
            (log.template_id, log.user_id, log.year, log.coupon_id),
        )
        return log
