"""Permission checker port - RBAC authorization."""

from typing import Protocol

from storeadmin.domain.services.permission_resolver import PermissionResolver
from storeadmin.domain.value_objects import PermissionAction, Resource, Role


class PermissionChecker(Protocol):
    """Port for resolving an actor's permissions against the store."""

    async def resolver_for(self, user_id: str, role: Role) -> PermissionResolver: ...

    async def check(
        self, user_id: str, role: Role, resource: Resource, action: PermissionAction
    ) -> bool: ...
