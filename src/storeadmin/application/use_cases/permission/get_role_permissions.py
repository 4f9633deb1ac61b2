"""Get role permissions use case."""

from storeadmin.application.dto.actor import Actor
from storeadmin.application.permission_store import PermissionStore
from storeadmin.application.use_cases.permission._guards import require_admin
from storeadmin.domain.value_objects import PermissionMatrix, Role


class GetRolePermissionsUseCase:
    """Effective matrices of the configurable roles, for the role editor."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor: Actor) -> dict[Role, PermissionMatrix]:
        require_admin(actor)
        async with self._uow_factory() as uow:
            return await PermissionStore(uow).get_role_permissions()
