"""Notification template repository port."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from storeadmin.domain.entities import NotificationTemplate


class NotificationTemplateRepository(Protocol):
    """Port for notification template persistence."""

    async def get_by_id(self, template_id: UUID) -> NotificationTemplate | None: ...

    async def list_all(self) -> list[NotificationTemplate]: ...

    async def list_active(self) -> list[NotificationTemplate]: ...

    async def create(self, template: NotificationTemplate) -> NotificationTemplate: ...

    async def record_run(self, template_id: UUID, run_at: datetime, count: int) -> None: ...

    async def update(self, template: NotificationTemplate) -> None: ...

    async def delete(self, template_id: UUID) -> None: ...
