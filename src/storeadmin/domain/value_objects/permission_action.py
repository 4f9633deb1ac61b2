"""Permission actions for RBAC."""

from enum import StrEnum


class PermissionAction(StrEnum):
    """Unit of permission granularity on a resource."""

    VIEW = "view"
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> "PermissionAction":
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return cls.UNKNOWN

    @classmethod
    def known(cls) -> tuple["PermissionAction", ...]:
        return (cls.VIEW, cls.CREATE, cls.EDIT, cls.DELETE)
