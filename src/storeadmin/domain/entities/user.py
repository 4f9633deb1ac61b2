"""User entity."""

from dataclasses import dataclass
from datetime import date

from storeadmin.domain.value_objects import Role


@dataclass
class User:
    """Store user. id is the auth provider subject."""

    id: str
    email: str
    role: Role
    name: str | None = None
    birth_date: date | None = None
