"""Domain value objects."""

from storeadmin.domain.value_objects.coupon_type import CouponExpiryMode, CouponType
from storeadmin.domain.value_objects.override_state import OverrideState
from storeadmin.domain.value_objects.permission_action import PermissionAction
from storeadmin.domain.value_objects.permission_matrix import MatrixLike, PermissionMatrix
from storeadmin.domain.value_objects.resource import Resource
from storeadmin.domain.value_objects.role import CONFIGURABLE_ROLES, Role
from storeadmin.domain.value_objects.template_trigger import TemplateTrigger

__all__ = [
    "CONFIGURABLE_ROLES",
    "CouponExpiryMode",
    "CouponType",
    "MatrixLike",
    "OverrideState",
    "PermissionAction",
    "PermissionMatrix",
    "Resource",
    "Role",
    "TemplateTrigger",
]
