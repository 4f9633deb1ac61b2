"""Functional areas of the admin console subject to access control."""

from enum import StrEnum


class Resource(StrEnum):
    """Known resources. Unrecognized names parse as UNKNOWN, which always denies."""

    DASHBOARD = "dashboard"
    PRODUCTS = "products"
    CATEGORIES = "categories"
    CONTENT = "content"
    TYPES = "types"
    BANNERS = "banners"
    MENU = "menu"
    ORDERS = "orders"
    QUOTES = "quotes"
    COUPONS = "coupons"
    NOTIFICATIONS = "notifications"
    MEDIA = "media"
    USERS = "users"
    ROLES = "roles"
    AUDIT = "audit"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> "Resource":
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return cls.UNKNOWN

    @classmethod
    def known(cls) -> tuple["Resource", ...]:
        """All resources except UNKNOWN, in declaration order."""
        return tuple(r for r in cls if r is not cls.UNKNOWN)
