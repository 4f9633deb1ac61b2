"""Notification template API resources."""

from uuid import UUID

import falcon.asgi

from storeadmin.application.dto.actor import Actor
from storeadmin.application.ports import PermissionChecker
from storeadmin.application.use_cases.notification.create_template import CreateTemplateUseCase
from storeadmin.application.use_cases.notification.send_test_template import (
    TemplateTestSendUseCase,
)
from storeadmin.application.use_cases.notification.update_template import (
    DeleteTemplateUseCase,
    UpdateTemplateUseCase,
)
from storeadmin.domain.entities import NotificationTemplate
from storeadmin.domain.exceptions import NotFound, ValidationError
from storeadmin.domain.value_objects import PermissionAction, Resource
from storeadmin.interfaces.api.hooks import require_permission


def _template_uuid(template_id: str) -> UUID:
    try:
        return UUID(template_id)
    except ValueError:
        raise NotFound("Template", template_id) from None


def _decimal_str(value) -> str | None:
    return str(value) if value is not None else None


def template_to_dict(t: NotificationTemplate) -> dict:
    return {
        "id": str(t.id),
        "name": t.name,
        "trigger": t.trigger.value,
        "titles": t.titles,
        "messages": t.messages,
        "days_before": t.days_before,
        "custom_month": t.custom_month,
        "custom_day": t.custom_day,
        "recurring": t.recurring,
        "link": t.link,
        "active": t.active,
        "coupon_enabled": t.coupon_enabled,
        "coupon_type": t.coupon_type.value if t.coupon_type else None,
        "coupon_value": _decimal_str(t.coupon_value),
        "coupon_currency": t.coupon_currency,
        "coupon_duration": t.coupon_duration,
        "coupon_per_user": t.coupon_per_user,
        "coupon_product_ids": t.coupon_product_ids,
        "coupon_allow_on_sale": t.coupon_allow_on_sale,
        "coupon_min_purchase": _decimal_str(t.coupon_min_purchase),
        "coupon_expiry_mode": t.coupon_expiry_mode.value if t.coupon_expiry_mode else None,
        "coupon_expires_at": t.coupon_expires_at.isoformat() if t.coupon_expires_at else None,
        "last_run_at": t.last_run_at.isoformat() if t.last_run_at else None,
        "last_run_count": t.last_run_count,
    }


class NotificationTemplatesResource:
    """GET/POST /v1/admin/notification-templates."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        create_template: CreateTemplateUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self.permission_checker = permission_checker
        self._create_template = create_template

    @require_permission(Resource.NOTIFICATIONS, PermissionAction.VIEW)
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        async with self._uow_factory() as uow:
            templates = await uow.templates.list_all()
        resp.media = {"items": [template_to_dict(t) for t in templates]}
        resp.status = falcon.HTTP_200

    @require_permission(Resource.NOTIFICATIONS, PermissionAction.CREATE)
    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = req.context.user
        body = await req.get_media()
        template = await self._create_template.execute(Actor(user.user_id, user.role), body)
        resp.media = template_to_dict(template)
        resp.status = falcon.HTTP_201


class NotificationTemplateResource:
    """GET/PUT/DELETE /v1/admin/notification-templates/{template_id}."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        update_template: UpdateTemplateUseCase,
        delete_template: DeleteTemplateUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self.permission_checker = permission_checker
        self._update_template = update_template
        self._delete_template = delete_template

    @require_permission(Resource.NOTIFICATIONS, PermissionAction.VIEW)
    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, template_id: str
    ) -> None:
        tid = _template_uuid(template_id)
        async with self._uow_factory() as uow:
            template = await uow.templates.get_by_id(tid)
        if not template:
            raise NotFound("Template", template_id)
        resp.media = template_to_dict(template)
        resp.status = falcon.HTTP_200

    @require_permission(Resource.NOTIFICATIONS, PermissionAction.EDIT)
    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, template_id: str
    ) -> None:
        user = req.context.user
        tid = _template_uuid(template_id)
        body = await req.get_media()
        template = await self._update_template.execute(Actor(user.user_id, user.role), tid, body)
        resp.media = template_to_dict(template)
        resp.status = falcon.HTTP_200

    @require_permission(Resource.NOTIFICATIONS, PermissionAction.DELETE)
    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, template_id: str
    ) -> None:
        user = req.context.user
        await self._delete_template.execute(
            Actor(user.user_id, user.role), _template_uuid(template_id)
        )
        resp.media = {"success": True}
        resp.status = falcon.HTTP_200


class TemplateTestSendResource:
    """POST /v1/admin/notification-templates/{template_id}/test - send to one user now."""

    def __init__(
        self, permission_checker: PermissionChecker, send_test: TemplateTestSendUseCase
    ) -> None:
        self.permission_checker = permission_checker
        self._send_test = send_test

    @require_permission(Resource.NOTIFICATIONS, PermissionAction.CREATE)
    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, template_id: str
    ) -> None:
        user = req.context.user
        tid = _template_uuid(template_id)

        body = await req.get_media()
        target = body.get("user_id") if isinstance(body, dict) else None
        if not target:
            raise ValidationError("user_id is required")

        result = await self._send_test.execute(Actor(user.user_id, user.role), tid, str(target))
        resp.media = {
            "success": True,
            "notification_id": str(result.notification_id),
            "coupon_id": str(result.coupon_id) if result.coupon_id else None,
        }
        resp.status = falcon.HTTP_200
