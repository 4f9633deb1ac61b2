"""User repository port."""

from typing import Protocol

from storeadmin.domain.entities import User


class UserRepository(Protocol):
    """Port for user lookup."""

    async def get_by_id(self, user_id: str) -> User | None: ...

    async def list_all(self) -> list[User]: ...

    async def list_with_birth_date(self) -> list[User]: ...
