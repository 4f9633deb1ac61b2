"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from storeadmin.interfaces.api.errors import register_error_handlers
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


def create_app(
    *,
    health_resource: HealthResource,
    me_resource: MePermissionsResource,
    roles_resource: RolePermissionsResource,
    user_permissions_resource: UserPermissionsResource,
    audit_logs_resource: AuditLogsResource,
    templates_resource: NotificationTemplatesResource,
    template_resource: NotificationTemplateResource,
    template_test_resource: TemplateTestSendResource,
    cron_resource: CronNotificationsResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes and error handlers."""
    app = falcon.asgi.App(middleware=middleware or [])
    register_error_handlers(app)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/admin/me/permissions", me_resource)
    app.add_route("/v1/admin/roles", roles_resource)
    app.add_route("/v1/admin/users/{user_id}/permissions", user_permissions_resource)
    app.add_route("/v1/admin/audit-logs", audit_logs_resource)
    app.add_route("/v1/admin/notification-templates", templates_resource)
    app.add_route("/v1/admin/notification-templates/{template_id}", template_resource)
    app.add_route(
        "/v1/admin/notification-templates/{template_id}/test", template_test_resource
    )
    app.add_route("/v1/cron/notifications", cron_resource)
    return app
