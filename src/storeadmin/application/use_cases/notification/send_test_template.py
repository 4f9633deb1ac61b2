"""Test-send a notification template to one user."""

from datetime import UTC, datetime
from uuid import UUID

from storeadmin.application.dto.actor import Actor
from storeadmin.application.dto.template_dto import TemplateTestSendResult
from storeadmin.application.ports import PermissionChecker
from storeadmin.application.use_cases.notification._delivery import TemplateDelivery
from storeadmin.domain.exceptions import NotFound, PermissionDenied
from storeadmin.domain.value_objects import PermissionAction, Resource


class TemplateTestSendUseCase:
    """Send a template now, bypassing dedup. Coupon codes get a T suffix."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        delivery: TemplateDelivery | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._delivery = delivery or TemplateDelivery()

    async def execute(
        self,
        actor: Actor,
        template_id: UUID,
        user_id: str,
        now: datetime | None = None,
    ) -> TemplateTestSendResult:
        allowed = await self._permission_checker.check(
            actor.user_id, actor.role, Resource.NOTIFICATIONS, PermissionAction.CREATE
        )
        if not allowed:
            raise PermissionDenied("User cannot send notifications")

        now = now or datetime.now(UTC)
        async with self._uow_factory() as uow:
            template = await uow.templates.get_by_id(template_id)
            if not template:
                raise NotFound("Template", template_id)
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)

            issued = await self._delivery.issue_coupon(uow, template, user, now, test=True)
            notification = await self._delivery.notify(uow, template, user, now, issued)

        return TemplateTestSendResult(
            notification_id=notification.id,
            coupon_id=issued.coupon.id if issued else None,
        )
