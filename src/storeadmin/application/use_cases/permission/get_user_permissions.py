"""Get user permissions use case."""

from dataclasses import dataclass

from storeadmin.application.dto.actor import Actor
from storeadmin.application.permission_store import PermissionStore
from storeadmin.application.use_cases.permission._guards import require_admin
from storeadmin.domain.exceptions import NotFound
from storeadmin.domain.services.permission_resolver import effective_permissions
from storeadmin.domain.value_objects import PermissionMatrix, Role


@dataclass
class UserPermissions:
    """What the user permission editor needs for one user."""

    user_id: str
    role: Role
    role_permissions: PermissionMatrix
    user_overrides: PermissionMatrix


class GetUserPermissionsUseCase:
    """Role matrix and raw overrides for one user."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor: Actor, user_id: str) -> UserPermissions:
        require_admin(actor)
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)
            store = PermissionStore(uow)
            role_permissions = await store.get_role_permissions()
            overrides = await store.get_user_overrides(user_id)

        return UserPermissions(
            user_id=user.id,
            role=user.role,
            role_permissions=effective_permissions(user.role, role_permissions),
            user_overrides=overrides,
        )
