"""Stored permission entries - role defaults and per-user overrides."""

from dataclasses import dataclass

from storeadmin.domain.value_objects import PermissionMatrix, Role


@dataclass(frozen=True)
class RolePermissionEntry:
    """One stored cell of a configurable role's matrix."""

    role: Role
    resource: str
    action: str
    allowed: bool


@dataclass(frozen=True)
class UserPermissionEntry:
    """One stored override cell for a single user."""

    user_id: str
    resource: str
    action: str
    allowed: bool


def role_entries_to_matrices(
    entries: list[RolePermissionEntry],
) -> dict[Role, PermissionMatrix]:
    """Group stored role rows into role -> resource -> action -> allowed."""
    result: dict[Role, PermissionMatrix] = {}
    for e in entries:
        result.setdefault(e.role, {}).setdefault(e.resource, {})[e.action] = e.allowed
    return result


def user_entries_to_matrix(entries: list[UserPermissionEntry]) -> PermissionMatrix:
    """Group stored override rows into resource -> action -> allowed."""
    result: PermissionMatrix = {}
    for e in entries:
        result.setdefault(e.resource, {})[e.action] = e.allowed
    return result
