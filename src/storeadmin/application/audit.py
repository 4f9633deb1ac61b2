"""Audit trail helper shared by administrative use cases."""

import json
from datetime import UTC, datetime
from uuid import uuid4

from storeadmin.application.ports import UnitOfWork
from storeadmin.domain.entities import AuditLogEntry


async def record_audit(
    uow: UnitOfWork,
    *,
    user_id: str,
    action: str,
    resource: str,
    record_id: str,
    record_title: str | None = None,
    details: object | None = None,
) -> AuditLogEntry:
    """Append an audit entry in the caller's transaction. details is stored as JSON."""
    entry = AuditLogEntry(
        id=uuid4(),
        user_id=user_id,
        action=action,
        resource=resource,
        record_id=record_id,
        record_title=record_title,
        details=json.dumps(details, sort_keys=True) if details is not None else None,
        created_at=datetime.now(UTC),
    )
    return await uow.audit_logs.create(entry)
