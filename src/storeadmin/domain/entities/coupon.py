"""Coupon entity."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from storeadmin.domain.value_objects import CouponType


@dataclass
class Coupon:
    id: UUID
    code: str
    type: CouponType
    value: Decimal
    expires_at: datetime | None
    currency: str | None = None
    min_purchase: Decimal | None = None
    max_uses: int | None = 1
    per_user_limit: int = 1
    product_ids: list[str] = field(default_factory=list)
    allow_on_sale: bool = False
    show_on_product: bool = False
    active: bool = True
