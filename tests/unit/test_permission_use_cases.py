"""Unit tests for the permission store, checker and administration use cases."""

import json
from contextlib import asynccontextmanager

import psycopg
import pytest

from storeadmin.application.dto.actor import Actor
from storeadmin.application.permission_store import PermissionStore
from storeadmin.application.use_cases.permission.get_role_permissions import (
    GetRolePermissionsUseCase,
)
from storeadmin.application.use_cases.permission.get_user_permissions import (
    GetUserPermissionsUseCase,
)
from storeadmin.application.use_cases.permission.reset_user_overrides import (
    ResetUserOverridesUseCase,
)
from storeadmin.application.use_cases.permission.set_role_permissions import (
    SetRolePermissionsUseCase,
)
from storeadmin.application.use_cases.permission.set_user_overrides import (
    SetUserOverridesUseCase,
)
from storeadmin.domain.exceptions import (
    MatrixUnavailable,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from storeadmin.domain.services.permission_resolver import DEFAULT_ROLE_PERMISSIONS
from storeadmin.domain.value_objects import PermissionAction, Resource, Role
from storeadmin.infrastructure.permission.permission_checker import StorePermissionChecker

from tests.conftest import FakeUnitOfWork, make_user

ADMIN = Actor(user_id="admin-1", role=Role.ADMIN)
EDITOR = Actor(user_id="editor-1", role=Role.EDITOR)


# --- PermissionStore ---


@pytest.mark.asyncio
async def test_store_role_permissions_default_when_empty(fake_uow: FakeUnitOfWork) -> None:
    matrices = await PermissionStore(fake_uow).get_role_permissions()
    assert matrices == {
        Role.EDITOR: DEFAULT_ROLE_PERMISSIONS[Role.EDITOR],
        Role.AUTHOR: DEFAULT_ROLE_PERMISSIONS[Role.AUTHOR],
    }


@pytest.mark.asyncio
async def test_store_drops_unknown_cells_and_non_bools(fake_uow: FakeUnitOfWork) -> None:
    store = PermissionStore(fake_uow)
    saved = await store.set_role_permissions(
        Role.AUTHOR,
        {
            "Banners": {"VIEW": True, "publish": True},
            "spaceships": {"view": True},
            "menu": {"view": "yes"},
        },
    )
    assert saved == {"banners": {"view": True}}
    assert (await store.get_role_permissions())[Role.AUTHOR]["banners"]["view"] is True


@pytest.mark.asyncio
async def test_store_rejects_non_configurable_role(fake_uow: FakeUnitOfWork) -> None:
    with pytest.raises(ValidationError):
        await PermissionStore(fake_uow).set_role_permissions(Role.ADMIN, {"products": {"view": True}})


@pytest.mark.asyncio
async def test_store_user_overrides_roundtrip_and_clear(fake_uow: FakeUnitOfWork) -> None:
    store = PermissionStore(fake_uow)
    await store.set_user_overrides("editor-1", {"products": {"delete": False}, "coupons": {}})
    assert await store.get_user_overrides("editor-1") == {"products": {"delete": False}}
    assert await store.get_user_overrides("someone-else") == {}
    await store.clear_user_overrides("editor-1")
    assert await store.get_user_overrides("editor-1") == {}


# --- StorePermissionChecker ---


@pytest.mark.asyncio
async def test_checker_applies_stored_overrides(fake_uow: FakeUnitOfWork, uow_factory) -> None:
    await PermissionStore(fake_uow).set_user_overrides("editor-1", {"products": {"delete": False}})
    checker = StorePermissionChecker(uow_factory)

    assert not await checker.check("editor-1", Role.EDITOR, Resource.PRODUCTS, PermissionAction.DELETE)
    assert await checker.check("editor-2", Role.EDITOR, Resource.PRODUCTS, PermissionAction.DELETE)


@pytest.mark.asyncio
async def test_checker_admin_and_subscriber_skip_store() -> None:
    @asynccontextmanager
    async def exploding_factory():
        raise AssertionError("store must not be read")
        yield

    checker = StorePermissionChecker(exploding_factory)
    assert await checker.check("a", Role.ADMIN, Resource.ROLES, PermissionAction.EDIT)
    assert not await checker.check("s", Role.SUBSCRIBER, Resource.PRODUCTS, PermissionAction.VIEW)


@pytest.mark.asyncio
async def test_checker_falls_back_to_defaults_when_store_unavailable(caplog) -> None:
    @asynccontextmanager
    async def broken_factory():
        raise psycopg.OperationalError("connection refused")
        yield

    checker = StorePermissionChecker(broken_factory)
    resolver = await checker.resolver_for("author-1", Role.AUTHOR)

    assert resolver.role_permissions is DEFAULT_ROLE_PERMISSIONS
    assert resolver.user_overrides == {}
    assert resolver.can(Resource.CONTENT, PermissionAction.EDIT)
    assert not resolver.can(Resource.CONTENT, PermissionAction.DELETE)
    assert "Permission store unavailable" in caplog.text


@pytest.mark.asyncio
async def test_checker_falls_back_when_matrix_unreadable(fake_uow: FakeUnitOfWork, uow_factory) -> None:
    async def unreadable():
        raise MatrixUnavailable("Role permissions could not be read")

    fake_uow.role_permissions.list_all = unreadable
    checker = StorePermissionChecker(uow_factory)

    assert await checker.check("editor-1", Role.EDITOR, Resource.PRODUCTS, PermissionAction.DELETE)
    assert not await checker.check("author-1", Role.AUTHOR, Resource.PRODUCTS, PermissionAction.DELETE)


# --- Role permission use cases ---


@pytest.mark.asyncio
async def test_get_role_permissions_admin_only(uow_factory) -> None:
    use_case = GetRolePermissionsUseCase(uow_factory)
    assert set(await use_case.execute(ADMIN)) == {Role.EDITOR, Role.AUTHOR}
    with pytest.raises(PermissionDenied):
        await use_case.execute(EDITOR)


@pytest.mark.asyncio
async def test_set_role_permissions(fake_uow: FakeUnitOfWork, uow_factory) -> None:
    use_case = SetRolePermissionsUseCase(uow_factory)
    saved = await use_case.execute(
        ADMIN,
        {
            "editor": {"products": {"view": True, "edit": True, "delete": False}},
            "ADMIN": {"products": {"view": False}},
            "SUBSCRIBER": {"products": {"view": True}},
        },
    )

    assert set(saved) == {Role.EDITOR, Role.AUTHOR}
    assert saved[Role.AUTHOR] == {}
    matrices = await PermissionStore(fake_uow).get_role_permissions()
    assert matrices[Role.EDITOR]["products"]["delete"] is False
    assert all(e.role in (Role.EDITOR, Role.AUTHOR) for e in fake_uow.role_permissions.entries)

    entry = fake_uow.audit_logs.entries[-1]
    assert (entry.action, entry.resource, entry.record_id) == ("edit", "roles", "role-permissions")
    assert json.loads(entry.details)["EDITOR"]["products"]["delete"] is False


@pytest.mark.asyncio
async def test_set_role_permissions_rejects_non_admin_and_bad_body(uow_factory) -> None:
    use_case = SetRolePermissionsUseCase(uow_factory)
    with pytest.raises(PermissionDenied):
        await use_case.execute(EDITOR, {})
    with pytest.raises(ValidationError):
        await use_case.execute(ADMIN, ["EDITOR"])


# --- User override use cases ---


@pytest.mark.asyncio
async def test_get_user_permissions(fake_uow: FakeUnitOfWork, uow_factory) -> None:
    fake_uow.users.add(make_user("editor-1", Role.EDITOR))
    await PermissionStore(fake_uow).set_user_overrides("editor-1", {"coupons": {"view": True}})

    result = await GetUserPermissionsUseCase(uow_factory).execute(ADMIN, "editor-1")

    assert result.role is Role.EDITOR
    assert result.role_permissions["products"]["delete"] is True
    assert result.role_permissions["coupons"]["view"] is False
    assert result.user_overrides == {"coupons": {"view": True}}


@pytest.mark.asyncio
async def test_get_user_permissions_unknown_user(uow_factory) -> None:
    with pytest.raises(NotFound):
        await GetUserPermissionsUseCase(uow_factory).execute(ADMIN, "ghost")


@pytest.mark.asyncio
async def test_set_user_overrides(fake_uow: FakeUnitOfWork, uow_factory) -> None:
    fake_uow.users.add(make_user("author-1", Role.AUTHOR))
    saved = await SetUserOverridesUseCase(uow_factory).execute(
        ADMIN, "author-1", {"banners": {"view": True}, "nope": {"view": True}}
    )

    assert saved == {"banners": {"view": True}}
    entry = fake_uow.audit_logs.entries[-1]
    assert (entry.action, entry.resource, entry.record_id) == ("edit", "users", "author-1")


@pytest.mark.asyncio
async def test_set_user_overrides_only_for_configurable_users(fake_uow: FakeUnitOfWork, uow_factory) -> None:
    fake_uow.users.add(make_user("admin-2", Role.ADMIN))
    fake_uow.users.add(make_user("cust-1", Role.SUBSCRIBER))
    use_case = SetUserOverridesUseCase(uow_factory)
    for user_id in ("admin-2", "cust-1"):
        with pytest.raises(ValidationError, match="EDITOR or AUTHOR"):
            await use_case.execute(ADMIN, user_id, {"products": {"view": True}})
    with pytest.raises(NotFound):
        await use_case.execute(ADMIN, "ghost", {})
    with pytest.raises(PermissionDenied):
        await use_case.execute(EDITOR, "cust-1", {})


@pytest.mark.asyncio
async def test_reset_user_overrides(fake_uow: FakeUnitOfWork, uow_factory) -> None:
    await PermissionStore(fake_uow).set_user_overrides("editor-1", {"products": {"delete": False}})
    await ResetUserOverridesUseCase(uow_factory).execute(ADMIN, "editor-1")

    assert fake_uow.user_permissions.entries == []
    assert fake_uow.audit_logs.entries[-1].action == "delete"
