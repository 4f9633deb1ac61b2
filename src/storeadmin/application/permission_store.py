"""Permission store - matrix-shaped access to stored role and user permissions."""

from storeadmin.application.ports import UnitOfWork
from storeadmin.domain.entities import (
    RolePermissionEntry,
    UserPermissionEntry,
    role_entries_to_matrices,
    user_entries_to_matrix,
)
from storeadmin.domain.exceptions import ValidationError
from storeadmin.domain.services.permission_resolver import (
    merge_role_permissions,
    prune_overrides,
)
from storeadmin.domain.value_objects import PermissionAction, PermissionMatrix, Resource, Role


def _known_cells(matrix: PermissionMatrix) -> PermissionMatrix:
    """Drop cells naming unknown resources or actions."""
    result: PermissionMatrix = {}
    for resource, actions in prune_overrides(matrix).items():
        if Resource(resource) is Resource.UNKNOWN:
            continue
        kept = {
            PermissionAction(a).value: v
            for a, v in actions.items()
            if PermissionAction(a) is not PermissionAction.UNKNOWN
        }
        if kept:
            result[Resource(resource).value] = kept
    return result


class PermissionStore:
    """Reads and writes permission matrices within one unit of work."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def get_role_permissions(self) -> dict[Role, PermissionMatrix]:
        """Effective matrix per configurable role (defaults overlaid with stored rows)."""
        entries = await self._uow.role_permissions.list_all()
        return merge_role_permissions(role_entries_to_matrices(entries))

    async def get_user_overrides(self, user_id: str) -> PermissionMatrix:
        entries = await self._uow.user_permissions.list_for_user(user_id)
        return user_entries_to_matrix(entries)

    async def set_role_permissions(self, role: Role, matrix: PermissionMatrix) -> PermissionMatrix:
        if not role.is_configurable:
            raise ValidationError(f"Permissions for role {role} are not configurable")
        cleaned = _known_cells(matrix)
        await self._uow.role_permissions.replace_for_role(
            role,
            [
                RolePermissionEntry(role=role, resource=r, action=a, allowed=v)
                for r, actions in cleaned.items()
                for a, v in actions.items()
            ],
        )
        return cleaned

    async def set_user_overrides(self, user_id: str, matrix: PermissionMatrix) -> PermissionMatrix:
        cleaned = _known_cells(matrix)
        await self._uow.user_permissions.replace_for_user(
            user_id,
            [
                UserPermissionEntry(user_id=user_id, resource=r, action=a, allowed=v)
                for r, actions in cleaned.items()
                for a, v in actions.items()
            ],
        )
        return cleaned

    async def clear_user_overrides(self, user_id: str) -> None:
        await self._uow.user_permissions.delete_for_user(user_id)
