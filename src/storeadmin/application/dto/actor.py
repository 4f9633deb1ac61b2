"""Acting user DTO."""

from dataclasses import dataclass

from storeadmin.domain.value_objects import Role


@dataclass(frozen=True)
class Actor:
    """Authenticated caller as supplied by the session provider."""

    user_id: str
    role: Role
