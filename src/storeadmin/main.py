"""Application entry point and composition root."""

import logging

import falcon.asgi

from storeadmin import __version__
from storeadmin.application.use_cases.notification._delivery import TemplateDelivery
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
from storeadmin.config import get_settings
from storeadmin.infrastructure.auth.keycloak_provider import KeycloakProvider
from storeadmin.infrastructure.permission.permission_checker import StorePermissionChecker
from storeadmin.infrastructure.persistence.postgres.connection import create_pool
from storeadmin.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from storeadmin.interfaces.api.app import create_app
from storeadmin.interfaces.api.middleware.auth import AuthMiddleware
from storeadmin.interfaces.api.middleware.cors import CORSMiddleware
from storeadmin.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
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
from storeadmin.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point."""
    print(f"storeadmin v{__version__}")


def create_storeadmin_app() -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level)

    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    if settings.keycloak_client_secret:
        keycloak = KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
    else:
        keycloak = None
        logger.warning("Keycloak client secret not set; bearer tokens will be rejected")

    permission_checker = StorePermissionChecker(uow_factory)
    delivery = TemplateDelivery(
        default_currency=settings.default_coupon_currency,
        default_duration_days=settings.default_coupon_duration_days,
    )

    process_templates = ProcessTemplatesUseCase(uow_factory, delivery=delivery)
    process_reminders = ProcessRemindersUseCase(
        uow_factory,
        window_hours=settings.reminder_window_hours,
        default_currency=settings.default_coupon_currency,
    )
    send_test = TemplateTestSendUseCase(uow_factory, permission_checker, delivery=delivery)
    create_template = CreateTemplateUseCase(uow_factory, permission_checker)
    update_template = UpdateTemplateUseCase(uow_factory, permission_checker)
    delete_template = DeleteTemplateUseCase(uow_factory, permission_checker)

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app = create_app(
        health_resource=HealthResource(uow_factory),
        me_resource=MePermissionsResource(permission_checker),
        roles_resource=RolePermissionsResource(
            GetRolePermissionsUseCase(uow_factory),
            SetRolePermissionsUseCase(uow_factory),
        ),
        user_permissions_resource=UserPermissionsResource(
            GetUserPermissionsUseCase(uow_factory),
            SetUserOverridesUseCase(uow_factory),
            ResetUserOverridesUseCase(uow_factory),
        ),
        audit_logs_resource=AuditLogsResource(uow_factory, permission_checker),
        templates_resource=NotificationTemplatesResource(
            uow_factory, permission_checker, create_template
        ),
        template_resource=NotificationTemplateResource(
            uow_factory, permission_checker, update_template, delete_template
        ),
        template_test_resource=TemplateTestSendResource(permission_checker, send_test),
        cron_resource=CronNotificationsResource(
            process_templates, process_reminders, settings.cron_secret
        ),
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
        ],
    )
    logger.info("storeadmin v%s configured (%s)", __version__, settings.environment)
    return app


def run_server(host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run uvicorn server."""
    import uvicorn

    uvicorn.run(create_storeadmin_app(), host=host, port=port)
