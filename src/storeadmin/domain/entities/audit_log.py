"""Audit log entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class AuditLogEntry:
    """Record of an administrative change."""

    id: UUID
    user_id: str
    action: str
    resource: str
    record_id: str
    created_at: datetime
    record_title: str | None = None
    details: str | None = None
