"""Per-user override state of a single (resource, action) cell."""

from enum import StrEnum


class OverrideState(StrEnum):
    """INHERITED follows the role default; GRANTED/REVOKED are explicit."""

    INHERITED = "inherited"
    GRANTED = "granted"
    REVOKED = "revoked"

    @classmethod
    def from_value(cls, value: bool | None) -> "OverrideState":
        if value is None:
            return cls.INHERITED
        return cls.GRANTED if value else cls.REVOKED

    @property
    def value_or_none(self) -> bool | None:
        """Stored override value, None when inherited."""
        if self is OverrideState.INHERITED:
            return None
        return self is OverrideState.GRANTED
