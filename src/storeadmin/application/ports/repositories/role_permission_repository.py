"""Role permission repository port."""

from typing import Protocol

from storeadmin.domain.entities import RolePermissionEntry
from storeadmin.domain.value_objects import Role


class RolePermissionRepository(Protocol):
    """Port for stored role matrices (EDITOR, AUTHOR)."""

    async def list_all(self) -> list[RolePermissionEntry]: ...

    async def replace_for_role(self, role: Role, entries: list[RolePermissionEntry]) -> None: ...
