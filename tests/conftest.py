"""Pytest fixtures for storeadmin tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import datetime
from uuid import UUID

import pytest

from storeadmin.domain.entities import (
    AuditLogEntry,
    Coupon,
    Notification,
    NotificationTemplate,
    RolePermissionEntry,
    TemplateSendLog,
    User,
    UserPermissionEntry,
)
from storeadmin.domain.value_objects import Role


# --- Fake repositories ---


class FakeUserRepository:
    """In-memory user repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, User] = {}

    def add(self, user: User) -> User:
        self._by_id[user.id] = user
        return user

    async def get_by_id(self, user_id: str) -> User | None:
        return self._by_id.get(user_id)

    async def list_all(self) -> list[User]:
        return sorted(self._by_id.values(), key=lambda u: u.id)

    async def list_with_birth_date(self) -> list[User]:
        return [u for u in await self.list_all() if u.birth_date]


class FakeRolePermissionRepository:
    """In-memory role permission cells."""

    def __init__(self) -> None:
        self.entries: list[RolePermissionEntry] = []

    async def list_all(self) -> list[RolePermissionEntry]:
        return list(self.entries)

    async def replace_for_role(self, role: Role, entries: list[RolePermissionEntry]) -> None:
        self.entries = [e for e in self.entries if e.role != role] + list(entries)


class FakeUserPermissionRepository:
    """In-memory user override cells."""

    def __init__(self) -> None:
        self.entries: list[UserPermissionEntry] = []

    async def list_for_user(self, user_id: str) -> list[UserPermissionEntry]:
        return [e for e in self.entries if e.user_id == user_id]

    async def replace_for_user(self, user_id: str, entries: list[UserPermissionEntry]) -> None:
        await self.delete_for_user(user_id)
        self.entries.extend(entries)

    async def delete_for_user(self, user_id: str) -> None:
        self.entries = [e for e in self.entries if e.user_id != user_id]


class FakeAuditLogRepository:
    """In-memory audit log, newest first with id cursors."""

    def __init__(self) -> None:
        self.entries: list[AuditLogEntry] = []

    async def create(self, entry: AuditLogEntry) -> AuditLogEntry:
        self.entries.append(entry)
        return entry

    async def list(
        self,
        *,
        resource: str | None = None,
        cursor: str | None = None,
        limit: int = 50,
    ) -> tuple[list[AuditLogEntry], str | None]:
        items = [e for e in reversed(self.entries) if not resource or e.resource == resource]
        start = 0
        if cursor:
            for i, e in enumerate(items):
                if str(e.id) == cursor:
                    start = i + 1
                    break
        page = items[start : start + limit + 1]
        next_cursor = str(page[limit - 1].id) if len(page) > limit else None
        return (page[:limit], next_cursor)


class FakeNotificationTemplateRepository:
    """In-memory notification templates."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, NotificationTemplate] = {}

    def add(self, template: NotificationTemplate) -> NotificationTemplate:
        self._by_id[template.id] = template
        return template

    async def get_by_id(self, template_id: UUID) -> NotificationTemplate | None:
        return self._by_id.get(template_id)

    async def list_all(self) -> list[NotificationTemplate]:
        return list(self._by_id.values())

    async def list_active(self) -> list[NotificationTemplate]:
        return [t for t in self._by_id.values() if t.active]

    async def create(self, template: NotificationTemplate) -> NotificationTemplate:
        self._by_id[template.id] = template
        return template

    async def update(self, template: NotificationTemplate) -> None:
        self._by_id[template.id] = template

    async def delete(self, template_id: UUID) -> None:
        self._by_id.pop(template_id, None)

    async def record_run(self, template_id: UUID, run_at: datetime, count: int) -> None:
        t = self._by_id.get(template_id)
        if t:
            self._by_id[template_id] = replace(t, last_run_at=run_at, last_run_count=count)


class FakeCouponRepository:
    """In-memory coupons plus a set of (coupon_id, email) usages."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Coupon] = {}
        self.usages: set[tuple[UUID, str]] = set()

    async def get_by_id(self, coupon_id: UUID) -> Coupon | None:
        return self._by_id.get(coupon_id)

    async def get_by_code(self, code: str) -> Coupon | None:
        return next((c for c in self._by_id.values() if c.code == code), None)

    async def create(self, coupon: Coupon) -> Coupon:
        self._by_id[coupon.id] = coupon
        return coupon

    async def update(self, coupon: Coupon) -> None:
        self._by_id[coupon.id] = coupon

    async def is_used_by(self, coupon_id: UUID, email: str) -> bool:
        return (coupon_id, email) in self.usages

    def all(self) -> list[Coupon]:
        return list(self._by_id.values())


class FakeNotificationRepository:
    """In-memory notifications."""

    def __init__(self) -> None:
        self.items: list[Notification] = []

    async def create(self, notification: Notification) -> Notification:
        self.items.append(notification)
        return notification

    async def list_reminder_candidates(self, types: tuple[str, ...]) -> list[Notification]:
        return [
            n
            for n in self.items
            if n.coupon_id and n.read and n.reminder_sent_at is None and n.type in types
        ]

    async def mark_reminded(self, notification_id: UUID, at: datetime) -> None:
        self.items = [
            replace(n, reminder_sent_at=at) if n.id == notification_id else n
            for n in self.items
        ]


class FakeTemplateSendLogRepository:
    """In-memory template send log."""

    def __init__(self) -> None:
        self.logs: list[TemplateSendLog] = []

    async def exists_for_template(self, template_id: UUID) -> bool:
        return any(log.template_id == template_id for log in self.logs)

    async def user_ids_for_year(self, template_id: UUID, year: int) -> set[str]:
        return {
            log.user_id for log in self.logs if log.template_id == template_id and log.year == year
        }

    async def create(self, log: TemplateSendLog) -> TemplateSendLog:
        self.logs.append(log)
        return log


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.users = FakeUserRepository()
        self.role_permissions = FakeRolePermissionRepository()
        self.user_permissions = FakeUserPermissionRepository()
        self.audit_logs = FakeAuditLogRepository()
        self.templates = FakeNotificationTemplateRepository()
        self.coupons = FakeCouponRepository()
        self.notifications = FakeNotificationRepository()
        self.send_logs = FakeTemplateSendLogRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory whose units of work all share the given in-memory state."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


def make_user(user_id: str = "user-editor-1", role: Role = Role.EDITOR, **kwargs) -> User:
    return User(id=user_id, email=kwargs.pop("email", f"{user_id}@example.com"), role=role, **kwargs)


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager over the test's FakeUnitOfWork."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def mock_permission_checker():
    """AsyncMock for PermissionChecker - allows everything by default."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.check.return_value = True
    return mock
