"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool

from storeadmin.infrastructure.persistence.postgres.audit_log_repository import (
    PostgresAuditLogRepository,
)
from storeadmin.infrastructure.persistence.postgres.coupon_repository import (
    PostgresCouponRepository,
)
from storeadmin.infrastructure.persistence.postgres.notification_repository import (
    PostgresNotificationRepository,
    PostgresTemplateSendLogRepository,
)
from storeadmin.infrastructure.persistence.postgres.notification_template_repository import (
    PostgresNotificationTemplateRepository,
)
from storeadmin.infrastructure.persistence.postgres.role_permission_repository import (
    PostgresRolePermissionRepository,
)
from storeadmin.infrastructure.persistence.postgres.user_permission_repository import (
    PostgresUserPermissionRepository,
)
from storeadmin.infrastructure.persistence.postgres.user_repository import (
    PostgresUserRepository,
)


class PostgresUnitOfWork:
    """Repositories bound to one pooled connection, so they share one transaction."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn
        self.users = PostgresUserRepository(conn)
        self.role_permissions = PostgresRolePermissionRepository(conn)
        self.user_permissions = PostgresUserPermissionRepository(conn)
        self.audit_logs = PostgresAuditLogRepository(conn)
        self.templates = PostgresNotificationTemplateRepository(conn)
        self.coupons = PostgresCouponRepository(conn)
        self.notifications = PostgresNotificationRepository(conn)
        self.send_logs = PostgresTemplateSendLogRepository(conn)

    async def commit(self) -> None:
        await self._conn.commit()

    async def rollback(self) -> None:
        await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """UnitOfWork factory: commits when the block exits cleanly, rolls back otherwise."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        async with pool.connection() as conn:
            uow = PostgresUnitOfWork(conn)
            try:
                yield uow
            except BaseException:
                await uow.rollback()
                raise
            await uow.commit()

    return factory
