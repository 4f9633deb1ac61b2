"""Admin roles."""

from collections.abc import Iterable
from enum import StrEnum


class Role(StrEnum):
    """Closed set of user roles.

    Unknown values parse as SUBSCRIBER so a corrupted or missing role claim
    can never grant access.
    """

    ADMIN = "ADMIN"
    EDITOR = "EDITOR"
    AUTHOR = "AUTHOR"
    SUBSCRIBER = "SUBSCRIBER"

    @classmethod
    def _missing_(cls, value: object) -> "Role":
        if isinstance(value, str):
            for member in cls:
                if member.value == value.strip().upper():
                    return member
        return cls.SUBSCRIBER

    @classmethod
    def from_claims(cls, claims: Iterable[str]) -> "Role":
        """Highest-privilege known role among token claims, SUBSCRIBER if none."""
        found = {cls(c) for c in claims if isinstance(c, str)}
        for role in _PRECEDENCE:
            if role in found:
                return role
        return cls.SUBSCRIBER

    @property
    def has_admin_access(self) -> bool:
        """ADMIN, EDITOR and AUTHOR may enter the admin area."""
        return self in (Role.ADMIN, Role.EDITOR, Role.AUTHOR)

    @property
    def is_configurable(self) -> bool:
        """Only EDITOR and AUTHOR have stored, editable permissions."""
        return self in CONFIGURABLE_ROLES


_PRECEDENCE = (Role.ADMIN, Role.EDITOR, Role.AUTHOR, Role.SUBSCRIBER)

CONFIGURABLE_ROLES: tuple[Role, ...] = (Role.EDITOR, Role.AUTHOR)
