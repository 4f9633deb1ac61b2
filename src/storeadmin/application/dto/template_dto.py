"""Notification job DTOs."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass
class ProcessTemplatesResult:
    processed: int = 0
    sent: int = 0
    coupons_created: int = 0
    errors: list[str] = field(default_factory=list)


@dataclass
class ProcessRemindersResult:
    sent: int = 0
    errors: list[str] = field(default_factory=list)


@dataclass
class TemplateTestSendResult:
    notification_id: UUID
    coupon_id: UUID | None = None
