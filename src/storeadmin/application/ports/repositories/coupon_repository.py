"""Coupon repository port."""

from typing import Protocol
from uuid import UUID

from storeadmin.domain.entities import Coupon


class CouponRepository(Protocol):
    """Port for coupon persistence."""

    async def get_by_id(self, coupon_id: UUID) -> Coupon | None: ...

    async def get_by_code(self, code: str) -> Coupon | None: ...

    async def create(self, coupon: Coupon) -> Coupon: ...

    async def update(self, coupon: Coupon) -> None: ...

    async def is_used_by(self, coupon_id: UUID, email: str) -> bool: ...
