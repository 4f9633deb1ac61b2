"""Domain entities."""

from storeadmin.domain.entities.audit_log import AuditLogEntry
from storeadmin.domain.entities.coupon import Coupon
from storeadmin.domain.entities.notification import Notification, TemplateSendLog
from storeadmin.domain.entities.notification_template import NotificationTemplate
from storeadmin.domain.entities.permission import (
    RolePermissionEntry,
    UserPermissionEntry,
    role_entries_to_matrices,
    user_entries_to_matrix,
)
from storeadmin.domain.entities.user import User

__all__ = [
    "AuditLogEntry",
    "Coupon",
    "Notification",
    "NotificationTemplate",
    "RolePermissionEntry",
    "TemplateSendLog",
    "User",
    "UserPermissionEntry",
    "role_entries_to_matrices",
    "user_entries_to_matrix",
]
