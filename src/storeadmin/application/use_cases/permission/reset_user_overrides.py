"""Reset user permission overrides use case."""

from storeadmin.application.audit import record_audit
from storeadmin.application.dto.actor import Actor
from storeadmin.application.permission_store import PermissionStore
from storeadmin.application.use_cases.permission._guards import require_admin
from storeadmin.domain.value_objects import Resource


class ResetUserOverridesUseCase:
    """Drop every override of a user so role defaults apply again."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor: Actor, user_id: str) -> None:
        require_admin(actor)
        async with self._uow_factory() as uow:
            await PermissionStore(uow).clear_user_overrides(user_id)
            await record_audit(
                uow,
                user_id=actor.user_id,
                action="delete",
                resource=Resource.USERS.value,
                record_id=user_id,
                record_title="Permission overrides",
            )
