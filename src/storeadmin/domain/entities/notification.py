"""Notification and send-log entities."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Notification:
    """In-app notification. title/message hold JSON of localized strings."""

    id: UUID
    user_id: str
    type: str
    title: str
    message: str
    created_at: datetime
    link: str | None = None
    coupon_id: UUID | None = None
    read: bool = False
    reminder_sent_at: datetime | None = None


@dataclass
class TemplateSendLog:
    """Dedup record - at most one send per template, user and year."""

    template_id: UUID
    user_id: str
    year: int
    coupon_id: UUID | None = None
