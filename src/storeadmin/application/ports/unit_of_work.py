"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from storeadmin.application.ports.repositories import (
    AuditLogRepository,
    CouponRepository,
    NotificationRepository,
    NotificationTemplateRepository,
    RolePermissionRepository,
    TemplateSendLogRepository,
    UserPermissionRepository,
    UserRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def users(self) -> UserRepository: ...

    @property
    def role_permissions(self) -> RolePermissionRepository: ...

    @property
    def user_permissions(self) -> UserPermissionRepository: ...

    @property
    def audit_logs(self) -> AuditLogRepository: ...

    @property
    def templates(self) -> NotificationTemplateRepository: ...

    @property
    def coupons(self) -> CouponRepository: ...

    @property
    def notifications(self) -> NotificationRepository: ...

    @property
    def send_logs(self) -> TemplateSendLogRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
