"""Process notification templates use case - the daily cron job."""

import logging
from datetime import UTC, datetime, timedelta

from storeadmin.application.dto.template_dto import ProcessTemplatesResult
from storeadmin.application.use_cases.notification._delivery import TemplateDelivery
from storeadmin.domain.entities import NotificationTemplate, TemplateSendLog, User
from storeadmin.domain.services.trigger_schedule import birthday_matches, matches_trigger
from storeadmin.domain.value_objects import TemplateTrigger

logger = logging.getLogger(__name__)


class ProcessTemplatesUseCase:
    """Fire every active template whose trigger falls days_before days from today.

    Each user is delivered in its own transaction so one failure does not undo
    the others. Failures are collected in the result.
    """

    def __init__(
        self, unit_of_work_factory: type, delivery: TemplateDelivery | None = None
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._delivery = delivery or TemplateDelivery()

    async def execute(self, now: datetime | None = None) -> ProcessTemplatesResult:
        now = now or datetime.now(UTC)
        result = ProcessTemplatesResult()

        async with self._uow_factory() as uow:
            templates = await uow.templates.list_active()

        for template in templates:
            result.processed += 1
            try:
                await self._process_template(template, now, result)
            except Exception as e:
                logger.exception("Template %r failed", template.name)
                result.errors.append(f'Template "{template.name}": {e}')

        logger.info(
            "Processed %d templates, sent %d notifications, created %d coupons, %d errors",
            result.processed,
            result.sent,
            result.coupons_created,
            len(result.errors),
        )
        return result

    async def _process_template(
        self, template: NotificationTemplate, now: datetime, result: ProcessTemplatesResult
    ) -> None:
        year = now.year
        event_date = now.date() + timedelta(days=template.days_before)

        async with self._uow_factory() as uow:
            if (
                template.trigger is TemplateTrigger.CUSTOM_DATE
                and not template.recurring
                and await uow.send_logs.exists_for_template(template.id)
            ):
                return
            users = await self._matching_users(uow, template, event_date)
            if users:
                already_sent = await uow.send_logs.user_ids_for_year(template.id, year)
                users = [u for u in users if u.id not in already_sent]
            if not users:
                await uow.templates.record_run(template.id, now, 0)
                return

        sent = 0
        for user in users:
            try:
                async with self._uow_factory() as uow:
                    issued = await self._delivery.issue_coupon(uow, template, user, now)
                    await self._delivery.notify(uow, template, user, now, issued)
                    await uow.send_logs.create(
                        TemplateSendLog(
                            template_id=template.id,
                            user_id=user.id,
                            year=year,
                            coupon_id=issued.coupon.id if issued else None,
                        )
                    )
            except Exception as e:
                logger.warning("Template %r user %s failed: %s", template.name, user.id, e)
                result.errors.append(f'Template "{template.name}" user {user.id}: {e}')
                continue
            if issued and issued.created:
                result.coupons_created += 1
            sent += 1
            result.sent += 1

        async with self._uow_factory() as uow:
            await uow.templates.record_run(template.id, now, sent)

    @staticmethod
    async def _matching_users(uow, template: NotificationTemplate, event_date) -> list[User]:
        if template.trigger is TemplateTrigger.BIRTHDAY:
            users = await uow.users.list_with_birth_date()
            return [u for u in users if birthday_matches(u.birth_date, event_date)]
        if matches_trigger(
            template.trigger, event_date, template.custom_month, template.custom_day
        ):
            return await uow.users.list_all()
        return []
