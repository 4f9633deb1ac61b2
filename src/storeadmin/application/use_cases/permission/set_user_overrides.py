"""Set user permission overrides use case."""

from collections.abc import Mapping

from storeadmin.application.audit import record_audit
from storeadmin.application.dto.actor import Actor
from storeadmin.application.permission_store import PermissionStore
from storeadmin.application.use_cases.permission._guards import require_admin
from storeadmin.domain.exceptions import NotFound, ValidationError
from storeadmin.domain.value_objects import PermissionMatrix, Resource


class SetUserOverridesUseCase:
    """Replace all overrides of an EDITOR or AUTHOR user."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self, actor: Actor, user_id: str, overrides: Mapping[str, object] | None
    ) -> PermissionMatrix:
        require_admin(actor)
        if overrides is not None and not isinstance(overrides, Mapping):
            raise ValidationError("overrides must be an object")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)
            if not user.role.is_configurable:
                raise ValidationError("Can only set overrides for EDITOR or AUTHOR users")

            saved = await PermissionStore(uow).set_user_overrides(user_id, overrides or {})
            await record_audit(
                uow,
                user_id=actor.user_id,
                action="edit",
                resource=Resource.USERS.value,
                record_id=user_id,
                record_title=user.email,
                details={"overrides": saved},
            )
        return saved
