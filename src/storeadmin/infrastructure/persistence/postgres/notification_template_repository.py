"""PostgreSQL notification template repository implementation."""

from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from storeadmin.domain.entities import NotificationTemplate
from storeadmin.domain.value_objects import CouponExpiryMode, CouponType, TemplateTrigger

_COLUMNS = (
    "id, name, trigger, titles, messages, days_before, custom_month, custom_day, "
    "recurring, link, active, coupon_enabled, coupon_type, coupon_value, coupon_currency, "
    "coupon_duration, coupon_per_user, coupon_product_ids, coupon_allow_on_sale, "
    "coupon_min_purchase, coupon_expiry_mode, coupon_expires_at, created_by, "
    "last_run_at, last_run_count"
)


_EDITABLE = (
    "name", "trigger", "titles", "messages", "days_before", "custom_month", "custom_day",
    "recurring", "link", "active", "coupon_enabled", "coupon_type", "coupon_value",
    "coupon_currency", "coupon_duration", "coupon_per_user", "coupon_product_ids",
    "coupon_allow_on_sale", "coupon_min_purchase", "coupon_expiry_mode", "coupon_expires_at",
)


def _editable_values(t: NotificationTemplate) -> tuple:
    """Values for _EDITABLE, in order."""
    return (
        t.name,
        t.trigger.value,
        Jsonb(t.titles),
        Jsonb(t.messages),
        t.days_before,
        t.custom_month,
        t.custom_day,
        t.recurring,
        t.link,
        t.active,
        t.coupon_enabled,
        t.coupon_type.value if t.coupon_type else None,
        t.coupon_value,
        t.coupon_currency,
        t.coupon_duration,
        t.coupon_per_user,
        t.coupon_product_ids,
        t.coupon_allow_on_sale,
        t.coupon_min_purchase,
        t.coupon_expiry_mode.value if t.coupon_expiry_mode else None,
        t.coupon_expires_at,
    )


def _row_to_template(r: tuple) -> NotificationTemplate:
    return NotificationTemplate(
        id=r[0],
        name=r[1],
        trigger=TemplateTrigger(r[2]),
        titles=r[3] or {},
        messages=r[4] or {},
        days_before=r[5],
        custom_month=r[6],
        custom_day=r[7],
        recurring=r[8],
        link=r[9],
        active=r[10],
        coupon_enabled=r[11],
        coupon_type=CouponType(r[12]) if r[12] else None,
        coupon_value=r[13],
        coupon_currency=r[14],
        coupon_duration=r[15],
        coupon_per_user=r[16],
        coupon_product_ids=list(r[17] or []),
        coupon_allow_on_sale=r[18],
        coupon_min_purchase=r[19],
        coupon_expiry_mode=CouponExpiryMode(r[20]) if r[20] else None,
        coupon_expires_at=r[21],
        created_by=r[22],
        last_run_at=r[23],
        last_run_count=r[24],
    )


class PostgresNotificationTemplateRepository:
    """Notification template repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, template_id: UUID) -> NotificationTemplate | None:
        """Get template by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM notification_template WHERE id = %s",
            (template_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_template(r)

    async def list_all(self) -> list[NotificationTemplate]:
        """List all templates, newest first."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM notification_template ORDER BY created_at DESC"
        )
        rows = await cur.fetchall()
        return [_row_to_template(r) for r in rows]

    async def list_active(self) -> list[NotificationTemplate]:
        """List active templates."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM notification_template WHERE active ORDER BY created_at"
        )
        rows = await cur.fetchall()
        return [_row_to_template(r) for r in rows]

    async def create(self, template: NotificationTemplate) -> NotificationTemplate:
        """Create template."""
        t = template
        await self._conn.execute(
            f"INSERT INTO notification_template ({_COLUMNS}) VALUES ("
            + ", ".join(["%s"] * 25)
            + ")",
            (t.id, *_editable_values(t), t.created_by, t.last_run_at, t.last_run_count),
        )
        return template

    async def update(self, template: NotificationTemplate) -> None:
        """Overwrite the editable fields of a template."""
        assignments = ", ".join(f"{c} = %s" for c in _EDITABLE)
        await self._conn.execute(
            f"UPDATE notification_template SET {assignments} WHERE id = %s",
            (*_editable_values(template), template.id),
        )

    async def delete(self, template_id: UUID) -> None:
        """Delete template. Send logs cascade."""
        await self._conn.execute(
            "DELETE FROM notification_template WHERE id = %s", (template_id,)
        )

    async def record_run(self, template_id: UUID, run_at: datetime, count: int) -> None:
        """Store last run time and number of notifications sent."""
        await self._conn.execute(
            "UPDATE notification_template SET last_run_at = %s, last_run_count = %s WHERE id = %s",
            (run_at, count, template_id),
        )
