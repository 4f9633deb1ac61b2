"""PostgreSQL coupon repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from storeadmin.domain.entities import Coupon
from storeadmin.domain.value_objects import CouponType

_COLUMNS = (
    "id, code, type, value, expires_at, currency, min_purchase, max_uses, "
    "per_user_limit, product_ids, allow_on_sale, show_on_product, active"
)


def _row_to_coupon(r: tuple) -> Coupon:
    return Coupon(
        id=r[0],
        code=r[1],
        type=CouponType(r[2]),
        value=r[3],
        expires_at=r[4],
        currency=r[5],
        min_purchase=r[6],
        max_uses=r[7],
        per_user_limit=r[8],
        product_ids=list(r[9] or []),
        allow_on_sale=r[10],
        show_on_product=r[11],
        active=r[12],
    )


class PostgresCouponRepository:
    """Coupon repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, coupon_id: UUID) -> Coupon | None:
        """Get coupon by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM coupon WHERE id = %s",
            (coupon_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_coupon(r)

    async def get_by_code(self, code: str) -> Coupon | None:
        """Get coupon by unique code."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM coupon WHERE code = %s",
            (code,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_coupon(r)

    async def create(self, coupon: Coupon) -> Coupon:
        """Create coupon."""
        c = coupon
        await self._conn.execute(
            f"INSERT INTO coupon ({_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                c.id,
                c.code,
                c.type.value,
                c.value,
                c.expires_at,
                c.currency,
                c.min_purchase,
                c.max_uses,
                c.per_user_limit,
                c.product_ids,
                c.allow_on_sale,
                c.show_on_product,
                c.active,
            ),
        )
        return coupon

    async def update(self, coupon: Coupon) -> None:
        """Update coupon terms."""
        c = coupon
        await self._conn.execute(
            "UPDATE coupon SET type=%s, value=%s, expires_at=%s, currency=%s, min_purchase=%s, "
            "per_user_limit=%s, product_ids=%s, allow_on_sale=%s WHERE id=%s",
            (
                c.type.value,
                c.value,
                c.expires_at,
                c.currency,
                c.min_purchase,
                c.per_user_limit,
                c.product_ids,
                c.allow_on_sale,
                c.id,
            ),
        )

    async def is_used_by(self, coupon_id: UUID, email: str) -> bool:
        """Whether email has redeemed coupon."""
        cur = await self._conn.execute(
            "SELECT 1 FROM coupon_usage WHERE coupon_id = %s AND email = %s LIMIT 1",
            (coupon_id, email),
        )
        return await cur.fetchone() is not None
