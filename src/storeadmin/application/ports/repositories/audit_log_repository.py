"""Audit log repository port."""

from typing import Protocol

from storeadmin.domain.entities import AuditLogEntry


class AuditLogRepository(Protocol):
    """Port for audit log persistence."""

    async def create(self, entry: AuditLogEntry) -> AuditLogEntry: ...

    async def list(
        self,
        *,
        resource: str | None = None,
        cursor: str | None = None,
        limit: int = 50,
    ) -> tuple[list[AuditLogEntry], str | None]: ...
