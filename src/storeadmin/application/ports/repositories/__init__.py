"""Repository ports."""

from storeadmin.application.ports.repositories.audit_log_repository import AuditLogRepository
from storeadmin.application.ports.repositories.coupon_repository import CouponRepository
from storeadmin.application.ports.repositories.notification_repository import (
    NotificationRepository,
    TemplateSendLogRepository,
)
from storeadmin.application.ports.repositories.notification_template_repository import (
    NotificationTemplateRepository,
)
from storeadmin.application.ports.repositories.role_permission_repository import (
    RolePermissionRepository,
)
from storeadmin.application.ports.repositories.user_permission_repository import (
    UserPermissionRepository,
)
from storeadmin.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "AuditLogRepository",
    "CouponRepository",
    "NotificationRepository",
    "NotificationTemplateRepository",
    "RolePermissionRepository",
    "TemplateSendLogRepository",
    "UserPermissionRepository",
    "UserRepository",
]
