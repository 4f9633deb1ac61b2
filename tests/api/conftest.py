"""Fixtures for API tests."""

import pytest

from storeadmin.application.use_cases.notification.create_template import CreateTemplateUseCase
from storeadmin.application.use_cases.notification.process_reminders import (
    ProcessRemindersUseCase,
)
from storeadmin.application.use_cases.notification.process_templates import (
    ProcessTemplatesUseCase,
)
from storeadmin.application.use_cases.notification.send_test_template import (
    TemplateTestSendUseCase,
)
from storeadmin.application.use_cases.notification.update_template import (
    DeleteTemplateUseCase,
    UpdateTemplateUseCase,
)
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
from storeadmin.domain.value_objects import Role
from storeadmin.infrastructure.permission.permission_checker import StorePermissionChecker
from storeadmin.interfaces.api.app import create_app
from storeadmin.interfaces.api.middleware.auth import RequestUser
from storeadmin.interfaces.api.middleware.cors import CORSMiddleware
from storeadmin.interfaces.api.resources.audit_logs import AuditLogsResource
from storeadmin.interfaces.api.resources.cron import CronNotificationsResource
from storeadmin.interfaces.api.resources.health import HealthResource
from storeadmin.interfaces.api.resources.me import MePermissionsResource
from storeadmin.interfaces.api.resources.notification_templates import (
    NotificationTemplateResource,
    NotificationTemplatesResource,
    TemplateTestSendResource,
)
from storeadmin.interfaces.api.resources.roles import RolePermissionsResource
from storeadmin.interfaces.api.resources.user_permissions import UserPermissionsResource

from tests.conftest import make_user

CRON_SECRET = "cron-test-secret"
ADMIN_ORIGIN = "https://admin.example.com"


class AuthBypassMiddleware:
    """Sets context.user from X-Test-User / X-Test-Role headers; anonymous without them."""

    async def process_request(self, req, resp):
        user_id = req.get_header("X-Test-User")
        if not user_id:
            req.context.user = None
            return
        req.context.user = RequestUser(
            user_id=user_id, role=Role(req.get_header("X-Test-Role"))
        )


def as_user(user_id: str, role: Role | str) -> dict[str, str]:
    """Request headers identifying the caller."""
    return {"X-Test-User": user_id, "X-Test-Role": str(role)}


@pytest.fixture
def seeded_uow(fake_uow):
    for user_id, role in [
        ("admin-1", Role.ADMIN),
        ("editor-1", Role.EDITOR),
        ("author-1", Role.AUTHOR),
        ("cust-000001", Role.SUBSCRIBER),
    ]:
        fake_uow.users.add(make_user(user_id, role, name=user_id.title()))
    return fake_uow


def build_app(uow_factory, middleware: list):
    """Falcon ASGI app over the given unit of work factory."""
    checker = StorePermissionChecker(uow_factory)
    return create_app(
        health_resource=HealthResource(uow_factory),
        me_resource=MePermissionsResource(checker),
        roles_resource=RolePermissionsResource(
            GetRolePermissionsUseCase(uow_factory),
            SetRolePermissionsUseCase(uow_factory),
        ),
        user_permissions_resource=UserPermissionsResource(
            GetUserPermissionsUseCase(uow_factory),
            SetUserOverridesUseCase(uow_factory),
            ResetUserOverridesUseCase(uow_factory),
        ),
        audit_logs_resource=AuditLogsResource(uow_factory, checker),
        templates_resource=NotificationTemplatesResource(
            uow_factory, checker, CreateTemplateUseCase(uow_factory, checker)
        ),
        template_resource=NotificationTemplateResource(
            uow_factory,
            checker,
            UpdateTemplateUseCase(uow_factory, checker),
            DeleteTemplateUseCase(uow_factory, checker),
        ),
        template_test_resource=TemplateTestSendResource(
            checker, TemplateTestSendUseCase(uow_factory, checker)
        ),
        cron_resource=CronNotificationsResource(
            ProcessTemplatesUseCase(uow_factory),
            ProcessRemindersUseCase(uow_factory),
            CRON_SECRET,
        ),
        middleware=middleware,
    )


@pytest.fixture
def app(seeded_uow, uow_factory):
    """Falcon ASGI app with API resources for testing."""
    return build_app(uow_factory, [CORSMiddleware([ADMIN_ORIGIN]), AuthBypassMiddleware()])


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient

    return TestClient(app)
