"""Coupon issuing and notification rendering shared by the template jobs."""

import json
from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

from storeadmin.application.ports import UnitOfWork
from storeadmin.domain.entities import Coupon, Notification, NotificationTemplate, User
from storeadmin.domain.services.coupon_rules import (
    DEFAULT_COUPON_DURATION_DAYS,
    DEFAULT_CURRENCY,
    coupon_code,
    coupon_expiry,
    format_coupon_value,
    format_expiry,
)
from storeadmin.domain.services.placeholders import render_localized


@dataclass
class IssuedCoupon:
    coupon: Coupon
    created: bool
    display_value: str
    display_expiry: str


class TemplateDelivery:
    """Issues a template's coupon and notification to one user inside a unit of work."""

    def __init__(
        self,
        default_currency: str = DEFAULT_CURRENCY,
        default_duration_days: int = DEFAULT_COUPON_DURATION_DAYS,
    ) -> None:
        self._default_currency = default_currency
        self._default_duration_days = default_duration_days

    async def issue_coupon(
        self,
        uow: UnitOfWork,
        template: NotificationTemplate,
        user: User,
        now: datetime,
        *,
        test: bool = False,
    ) -> IssuedCoupon | None:
        """Create the user's coupon, or refresh its terms if the code already exists."""
        if not template.issues_coupon:
            return None

        code = coupon_code(template.trigger, user.id, now.year, test=test)
        expires_at = coupon_expiry(
            now,
            template.coupon_expiry_mode,
            template.coupon_expires_at,
            template.coupon_duration or self._default_duration_days,
        )

        existing = await uow.coupons.get_by_code(code)
        if existing:
            existing.expires_at = expires_at
            existing.type = template.coupon_type
            existing.value = template.coupon_value
            existing.currency = template.coupon_currency
            existing.min_purchase = template.coupon_min_purchase
            existing.per_user_limit = template.coupon_per_user
            existing.product_ids = list(template.coupon_product_ids)
            existing.allow_on_sale = template.coupon_allow_on_sale
            await uow.coupons.update(existing)
            coupon, created = existing, False
        else:
            coupon = await uow.coupons.create(
                Coupon(
                    id=uuid4(),
                    code=code,
                    type=template.coupon_type,
                    value=template.coupon_value,
                    expires_at=expires_at,
                    currency=template.coupon_currency,
                    min_purchase=template.coupon_min_purchase,
                    max_uses=1,
                    per_user_limit=template.coupon_per_user,
                    product_ids=list(template.coupon_product_ids),
                    allow_on_sale=template.coupon_allow_on_sale,
                    show_on_product=False,
                    active=True,
                )
            )
            created = True

        return IssuedCoupon(
            coupon=coupon,
            created=created,
            display_value=format_coupon_value(
                template.coupon_type,
                template.coupon_value,
                template.coupon_currency or self._default_currency,
            ),
            display_expiry=format_expiry(expires_at),
        )

    async def notify(
        self,
        uow: UnitOfWork,
        template: NotificationTemplate,
        user: User,
        now: datetime,
        issued: IssuedCoupon | None,
    ) -> Notification:
        """Create the rendered notification for user."""
        values = {
            "name": user.name,
            "coupon_code": issued.coupon.code if issued else None,
            "coupon_value": issued.display_value if issued else None,
            "expires_at": issued.display_expiry if issued else None,
        }
        return await uow.notifications.create(
            Notification(
                id=uuid4(),
                user_id=user.id,
                type=template.trigger.notification_type,
                title=json.dumps(render_localized(template.titles, **values), ensure_ascii=False),
                message=json.dumps(
                    render_localized(template.messages, **values), ensure_ascii=False
                ),
                created_at=now,
                link=template.link,
                coupon_id=issued.coupon.id if issued else None,
            )
        )
