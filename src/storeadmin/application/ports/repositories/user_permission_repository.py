"""User permission override repository port."""

from typing import Protocol

from storeadmin.domain.entities import UserPermissionEntry


class UserPermissionRepository(Protocol):
    """Port for per-user override matrices."""

    async def list_for_user(self, user_id: str) -> list[UserPermissionEntry]: ...

    async def replace_for_user(self, user_id: str, entries: list[UserPermissionEntry]) -> None: ...

    async def delete_for_user(self, user_id: str) -> None: ...
