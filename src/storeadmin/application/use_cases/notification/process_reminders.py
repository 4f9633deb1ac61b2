"""Coupon expiry reminder use case."""

import json
import logging
from datetime import UTC, datetime, timedelta
from uuid import uuid4

from storeadmin.application.dto.template_dto import ProcessRemindersResult
from storeadmin.domain.entities import Notification
from storeadmin.domain.services.coupon_rules import DEFAULT_CURRENCY, format_coupon_value
from storeadmin.domain.value_objects.template_trigger import (
    COUPON_REMINDER_TYPE,
    REMINDABLE_NOTIFICATION_TYPES,
)

logger = logging.getLogger(__name__)

REMINDER_TITLES = {
    "bg": "⏰ Не забравяй купона си!",
    "en": "⏰ Don't forget your coupon!",
    "es": "⏰ ¡No olvides tu cupón!",
}

REMINDER_MESSAGES = {
    "bg": "Купонът ти {code} за {value} изтича скоро! Използвай го преди да е късно.",
    "en": "Your coupon {code} for {value} expires soon! Use it before it's gone.",
    "es": "Tu cupón {code} por {value} expira pronto. ¡Úsalo antes de que caduque!",
}


class ProcessRemindersUseCase:
    """Remind users whose opened, unused coupon expires within the window."""

    def __init__(
        self,
        unit_of_work_factory: type,
        window_hours: int = 48,
        default_currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._window = timedelta(hours=window_hours)
        self._default_currency = default_currency

    async def execute(self, now: datetime | None = None) -> ProcessRemindersResult:
        now = now or datetime.now(UTC)
        deadline = now + self._window
        result = ProcessRemindersResult()

        async with self._uow_factory() as uow:
            candidates = await uow.notifications.list_reminder_candidates(
                REMINDABLE_NOTIFICATION_TYPES
            )

        for notification in candidates:
            try:
                async with self._uow_factory() as uow:
                    if await self._remind(uow, notification, now, deadline):
                        result.sent += 1
            except Exception as e:
                logger.warning("Reminder for notification %s failed: %s", notification.id, e)
                result.errors.append(f"Reminder for notification {notification.id}: {e}")

        logger.info("Sent %d coupon reminders, %d errors", result.sent, len(result.errors))
        return result

    async def _remind(self, uow, notification: Notification, now: datetime, deadline: datetime) -> bool:
        coupon = await uow.coupons.get_by_id(notification.coupon_id)
        if not coupon or not coupon.expires_at:
            return False
        if coupon.expires_at <= now or coupon.expires_at > deadline:
            return False
        user = await uow.users.get_by_id(notification.user_id)
        if not user or await uow.coupons.is_used_by(coupon.id, user.email):
            return False

        value = format_coupon_value(coupon.type, coupon.value, coupon.currency or self._default_currency)
        await uow.notifications.create(
            Notification(
                id=uuid4(),
                user_id=notification.user_id,
                type=COUPON_REMINDER_TYPE,
                title=json.dumps(REMINDER_TITLES, ensure_ascii=False),
                message=json.dumps(
                    {
                        lang: text.format(code=coupon.code, value=value)
                        for lang, text in REMINDER_MESSAGES.items()
                    },
                    ensure_ascii=False,
                ),
                created_at=now,
                link=notification.link,
                coupon_id=coupon.id,
            )
        )
        await uow.notifications.mark_reminded(notification.id, now)
        return True
