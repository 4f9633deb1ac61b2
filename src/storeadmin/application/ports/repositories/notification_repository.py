"""Notification and template send log repository ports."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from storeadmin.domain.entities import Notification, TemplateSendLog


class NotificationRepository(Protocol):
    """Port for in-app notifications."""

    async def create(self, notification: Notification) -> Notification: ...

    async def list_reminder_candidates(self, types: tuple[str, ...]) -> list[Notification]:
        """Read, not yet reminded notifications of the given types that carry a coupon."""
        ...

    async def mark_reminded(self, notification_id: UUID, at: datetime) -> None: ...


class TemplateSendLogRepository(Protocol):
    """Port for template send dedup records."""

    async def exists_for_template(self, template_id: UUID) -> bool: ...

    async def user_ids_for_year(self, template_id: UUID, year: int) -> set[str]: ...

    async def create(self, log: TemplateSendLog) -> TemplateSendLog: ...
