"""Edit and delete notification template use cases."""

from collections.abc import Mapping
from dataclasses import replace
from uuid import UUID

from storeadmin.application.audit import record_audit
from storeadmin.application.dto.actor import Actor
from storeadmin.application.ports import PermissionChecker
from storeadmin.application.use_cases.notification.create_template import (
    build_template,
    template_fields,
)
from storeadmin.domain.entities import NotificationTemplate
from storeadmin.domain.exceptions import NotFound, PermissionDenied, ValidationError
from storeadmin.domain.value_objects import PermissionAction, Resource


class UpdateTemplateUseCase:
    """Partially update a template. Actor needs notifications:edit.

    Fields missing from the request keep their stored value. titles and
    messages are merged per language. The merged template is validated like
    a new one, so switching the trigger away from custom_date clears the
    custom day and disabling the coupon clears every coupon field.
    """

    def __init__(self, unit_of_work_factory: type, permission_checker: PermissionChecker) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(
        self, actor: Actor, template_id: UUID, data: Mapping
    ) -> NotificationTemplate:
        allowed = await self._permission_checker.check(
            actor.user_id, actor.role, Resource.NOTIFICATIONS, PermissionAction.EDIT
        )
        if not allowed:
            raise PermissionDenied("User cannot edit notification templates")
        if not isinstance(data, Mapping):
            raise ValidationError("Body must be an object")

        async with self._uow_factory() as uow:
            existing = await uow.templates.get_by_id(template_id)
            if not existing:
                raise NotFound("Template", template_id)

            merged = {**template_fields(existing), **data}
            for key in ("titles", "messages"):
                if isinstance(data.get(key), Mapping):
                    merged[key] = {**getattr(existing, key), **data[key]}

            updated = replace(
                build_template(merged, created_by=existing.created_by),
                id=existing.id,
                last_run_at=existing.last_run_at,
                last_run_count=existing.last_run_count,
            )
            await uow.templates.update(updated)
            await record_audit(
                uow,
                user_id=actor.user_id,
                action="edit",
                resource=Resource.NOTIFICATIONS.value,
                record_id=str(updated.id),
                record_title=updated.name,
            )
        return updated


class DeleteTemplateUseCase:
    """Delete a template and its send log. Actor needs notifications:delete."""

    def __init__(self, unit_of_work_factory: type, permission_checker: PermissionChecker) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor: Actor, template_id: UUID) -> None:
        allowed = await self._permission_checker.check(
            actor.user_id, actor.role, Resource.NOTIFICATIONS, PermissionAction.DELETE
        )
        if not allowed:
            raise PermissionDenied("User cannot delete notification templates")

        async with self._uow_factory() as uow:
            template = await uow.templates.get_by_id(template_id)
            if not template:
                raise NotFound("Template", template_id)
            await uow.templates.delete(template_id)
            await record_audit(
                uow,
                user_id=actor.user_id,
                action="delete",
                resource=Resource.NOTIFICATIONS.value,
                record_id=str(template_id),
                record_title=template.name,
            )
