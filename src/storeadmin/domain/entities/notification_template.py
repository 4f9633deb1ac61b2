"""Notification template entity."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from storeadmin.domain.value_objects import CouponExpiryMode, CouponType, TemplateTrigger


@dataclass
class NotificationTemplate:
    """Recurring notification fired by a calendar trigger, optionally with a coupon.

    titles/messages are keyed by language code (bg, en, es).
    """

    id: UUID
    name: str
    trigger: TemplateTrigger
    titles: dict[str, str]
    messages: dict[str, str]
    days_before: int = 0
    custom_month: int | None = None
    custom_day: int | None = None
    recurring: bool = True
    link: str | None = None
    active: bool = True
    coupon_enabled: bool = False
    coupon_type: CouponType | None = None
    coupon_value: Decimal | None = None
    coupon_currency: str | None = None
    coupon_duration: int | None = None
    coupon_per_user: int = 1
    coupon_product_ids: list[str] = field(default_factory=list)
    coupon_allow_on_sale: bool = False
    coupon_min_purchase: Decimal | None = None
    coupon_expiry_mode: CouponExpiryMode | None = None
    coupon_expires_at: datetime | None = None
    created_by: str | None = None
    last_run_at: datetime | None = None
    last_run_count: int = 0

    @property
    def issues_coupon(self) -> bool:
        return bool(self.coupon_enabled and self.coupon_type and self.coupon_value)
