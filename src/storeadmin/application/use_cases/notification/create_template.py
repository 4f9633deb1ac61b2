"""Create notification template use case."""

from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal, InvalidOperation
from uuid import uuid4

from storeadmin.application.audit import record_audit
from storeadmin.application.dto.actor import Actor
from storeadmin.application.ports import PermissionChecker
from storeadmin.domain.entities import NotificationTemplate
from storeadmin.domain.exceptions import PermissionDenied, ValidationError
from storeadmin.domain.services.coupon_rules import DEFAULT_COUPON_DURATION_DAYS
from storeadmin.domain.value_objects import (
    CouponExpiryMode,
    CouponType,
    PermissionAction,
    Resource,
    TemplateTrigger,
)

LANGUAGES = ("bg", "en", "es")


def _decimal(value: object) -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        result = Decimal(str(value))
    except InvalidOperation:
        return None
    return result if result.is_finite() else None


def _localized(data: Mapping, key: str) -> dict[str, str]:
    texts = data.get(key)
    if not isinstance(texts, Mapping):
        return {}
    return {lang: texts[lang] for lang in LANGUAGES if isinstance(texts.get(lang), str) and texts[lang]}


def build_template(data: Mapping, created_by: str | None = None) -> NotificationTemplate:
    """Validate request data and build a template. Raises ValidationError."""
    titles = _localized(data, "titles")
    messages = _localized(data, "messages")
    if not data.get("name") or len(titles) < len(LANGUAGES) or len(messages) < len(LANGUAGES):
        raise ValidationError("Name, trigger, title, and message in all languages are required")

    try:
        trigger = TemplateTrigger(data.get("trigger"))
    except ValueError:
        raise ValidationError("Invalid trigger type") from None

    custom_month = data.get("custom_month")
    custom_day = data.get("custom_day")
    if trigger is TemplateTrigger.CUSTOM_DATE:
        if not custom_month or not custom_day:
            raise ValidationError("Custom date requires month and day")
        try:
            custom_month, custom_day = int(custom_month), int(custom_day)
        except (TypeError, ValueError):
            raise ValidationError("Custom date requires month and day") from None
        if not (1 <= custom_month <= 12 and 1 <= custom_day <= 31):
            raise ValidationError("Custom date is out of range")
    else:
        custom_month = custom_day = None

    coupon_enabled = bool(data.get("coupon_enabled"))
    coupon_type = None
    coupon_value = None
    expiry_mode = None
    expires_at = None
    if coupon_enabled:
        try:
            coupon_type = CouponType(data.get("coupon_type"))
        except ValueError:
            coupon_type = None
        coupon_value = _decimal(data.get("coupon_value"))
        if not coupon_type or not coupon_value:
            raise ValidationError("Coupon type and value are required when coupon is enabled")
        if coupon_type is CouponType.FIXED and not data.get("coupon_currency"):
            raise ValidationError("Currency is required for fixed coupon type")
        try:
            expiry_mode = CouponExpiryMode(data.get("coupon_expiry_mode") or "duration")
        except ValueError:
            raise ValidationError("Invalid coupon expiry mode") from None
        if expiry_mode is CouponExpiryMode.DATE and data.get("coupon_expires_at"):
            try:
                expires_at = datetime.fromisoformat(str(data["coupon_expires_at"]))
            except ValueError:
                raise ValidationError("Invalid coupon expiry date") from None

    days_before = data.get("days_before")
    if days_before is None:
        days_before = 0
    elif isinstance(days_before, bool) or not isinstance(days_before, int) or days_before < 0:
        raise ValidationError("days_before must be a non-negative whole number")
    return NotificationTemplate(
        id=uuid4(),
        name=str(data["name"]),
        trigger=trigger,
        titles=titles,
        messages=messages,
        days_before=days_before,
        custom_month=int(custom_month) if custom_month else None,
        custom_day=int(custom_day) if custom_day else None,
        recurring=data.get("recurring") is not False,
        link=data.get("link") or None,
        active=data.get("active") is not False,
        coupon_enabled=coupon_enabled,
        coupon_type=coupon_type,
        coupon_value=coupon_value,
        coupon_currency=(data.get("coupon_currency") or None) if coupon_enabled else None,
        coupon_duration=(data.get("coupon_duration") or DEFAULT_COUPON_DURATION_DAYS)
        if coupon_enabled
        else None,
        coupon_per_user=(data.get("coupon_per_user") or 1) if coupon_enabled else 1,
        coupon_product_ids=list(data.get("coupon_product_ids") or []) if coupon_enabled else [],
        coupon_allow_on_sale=bool(data.get("coupon_allow_on_sale")) if coupon_enabled else False,
        coupon_min_purchase=_decimal(data.get("coupon_min_purchase")) if coupon_enabled else None,
        coupon_expiry_mode=expiry_mode,
        coupon_expires_at=expires_at,
        created_by=created_by,
    )


def template_fields(template: NotificationTemplate) -> dict:
    """Request-shaped fields of a stored template, as accepted by build_template."""
    t = template
    return {
        "name": t.name,
        "trigger": t.trigger.value,
        "titles": dict(t.titles),
        "messages": dict(t.messages),
        "days_before": t.days_before,
        "custom_month": t.custom_month,
        "custom_day": t.custom_day,
        "recurring": t.recurring,
        "link": t.link,
        "active": t.active,
        "coupon_enabled": t.coupon_enabled,
        "coupon_type": t.coupon_type.value if t.coupon_type else None,
        "coupon_value": t.coupon_value,
        "coupon_currency": t.coupon_currency,
        "coupon_duration": t.coupon_duration,
        "coupon_per_user": t.coupon_per_user,
        "coupon_product_ids": list(t.coupon_product_ids),
        "coupon_allow_on_sale": t.coupon_allow_on_sale,
        "coupon_min_purchase": t.coupon_min_purchase,
        "coupon_expiry_mode": t.coupon_expiry_mode.value if t.coupon_expiry_mode else None,
        "coupon_expires_at": t.coupon_expires_at.isoformat() if t.coupon_expires_at else None,
    }


class CreateTemplateUseCase:
    """Create a notification template. Actor needs notifications:create."""

    def __init__(self, unit_of_work_factory: type, permission_checker: PermissionChecker) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor: Actor, data: Mapping) -> NotificationTemplate:
        allowed = await self._permission_checker.check(
            actor.user_id, actor.role, Resource.NOTIFICATIONS, PermissionAction.CREATE
        )
        if not allowed:
            raise PermissionDenied("User cannot create notification templates")
        if not isinstance(data, Mapping):
            raise ValidationError("Body must be an object")

        template = build_template(data, created_by=actor.user_id)
        async with self._uow_factory() as uow:
            await uow.templates.create(template)
            await record_audit(
                uow,
                user_id=actor.user_id,
                action="create",
                resource=Resource.NOTIFICATIONS.value,
                record_id=str(template.id),
                record_title=template.name,
            )
        return template
