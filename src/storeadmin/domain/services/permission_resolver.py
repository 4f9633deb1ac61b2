"""Permission resolution - role defaults plus sparse per-user overrides.

Everything here is pure: no I/O, no shared state, and nothing raises for
malformed input. Any ambiguity resolves to deny.
"""

from collections.abc import Mapping
from copy import deepcopy
from dataclasses import dataclass, field

from storeadmin.domain.value_objects import (
    CONFIGURABLE_ROLES,
    MatrixLike,
    OverrideState,
    PermissionAction,
    PermissionMatrix,
    Resource,
    Role,
)

_V, _C, _E, _D = (
    PermissionAction.VIEW,
    PermissionAction.CREATE,
    PermissionAction.EDIT,
    PermissionAction.DELETE,
)


def _row(*allowed: PermissionAction) -> dict[str, bool]:
    return {a.value: a in allowed for a in PermissionAction.known()}


# Least-privilege baseline shipped with the system. Also used when the
# permission store cannot be read. ADMIN and SUBSCRIBER are not listed.
DEFAULT_ROLE_PERMISSIONS: dict[Role, PermissionMatrix] = {
    Role.EDITOR: {
        Resource.DASHBOARD: _row(_V),
        Resource.PRODUCTS: _row(_V, _C, _E, _D),
        Resource.CATEGORIES: _row(_V, _C, _E, _D),
        Resource.CONTENT: _row(_V, _C, _E, _D),
        Resource.TYPES: _row(_V, _C, _E, _D),
        Resource.BANNERS: _row(_V, _C, _E, _D),
        Resource.MENU: _row(_V, _C, _E, _D),
        Resource.ORDERS: _row(_V, _E),
        Resource.QUOTES: _row(_V, _E),
        Resource.COUPONS: _row(),
        Resource.NOTIFICATIONS: _row(),
        Resource.MEDIA: _row(_V, _C, _E, _D),
        Resource.USERS: _row(),
        Resource.ROLES: _row(),
        Resource.AUDIT: _row(),
    },
    Role.AUTHOR: {
        Resource.DASHBOARD: _row(_V),
        Resource.PRODUCTS: _row(_V, _C, _E),
        Resource.CATEGORIES: _row(_V),
        Resource.CONTENT: _row(_V, _C, _E),
        Resource.TYPES: _row(_V),
        Resource.BANNERS: _row(),
        Resource.MENU: _row(),
        Resource.ORDERS: _row(_V),
        Resource.QUOTES: _row(_V),
        Resource.COUPONS: _row(),
        Resource.NOTIFICATIONS: _row(),
        Resource.MEDIA: _row(_V, _C, _E),
        Resource.USERS: _row(),
        Resource.ROLES: _row(),
        Resource.AUDIT: _row(),
    },
}

# Sidebar destinations in display order. None means no resource gate.
NAV_ITEMS: tuple[tuple[str, Resource | None], ...] = (
    ("/admin", None),
    ("/admin/menu", Resource.MENU),
    ("/admin/content", Resource.CONTENT),
    ("/admin/banners", Resource.BANNERS),
    ("/admin/types", Resource.TYPES),
    ("/admin/products", Resource.PRODUCTS),
    ("/admin/quotes", Resource.QUOTES),
    ("/admin/orders", Resource.ORDERS),
    ("/admin/coupons", Resource.COUPONS),
    ("/admin/notifications", Resource.NOTIFICATIONS),
    ("/admin/users", Resource.USERS),
    ("/admin/roles", Resource.ROLES),
    ("/admin/media", Resource.MEDIA),
    ("/admin/audit-logs", Resource.AUDIT),
)


def _lookup(matrix: object, resource: str, action: str) -> bool | None:
    """Return matrix[resource][action] if it is a bool, else None."""
    if not isinstance(matrix, Mapping):
        return None
    actions = matrix.get(resource)
    if not isinstance(actions, Mapping):
        return None
    value = actions.get(action)
    return value if isinstance(value, bool) else None


def can(
    role: Role | str | None,
    resource: Resource | str,
    action: PermissionAction | str,
    user_overrides: MatrixLike | None = None,
    role_permissions: Mapping[Role, MatrixLike] | None = None,
) -> bool:
    """Effective allow/deny for role on (resource, action).

    role_permissions defaults to DEFAULT_ROLE_PERMISSIONS. Overrides apply only
    to EDITOR and AUTHOR and win over the role default in both directions.
    """
    role = Role(role)
    if role is Role.ADMIN:
        return True
    if role is Role.SUBSCRIBER:
        return False

    res = Resource(resource)
    act = PermissionAction(action)
    if res is Resource.UNKNOWN or act is PermissionAction.UNKNOWN:
        return False

    override = _lookup(user_overrides, res.value, act.value)
    if override is not None:
        return override

    if role_permissions is None:
        role_permissions = DEFAULT_ROLE_PERMISSIONS
    role_matrix = role_permissions.get(role) if isinstance(role_permissions, Mapping) else None
    return _lookup(role_matrix, res.value, act.value) or False


def effective_permissions(
    role: Role | str | None,
    role_permissions: Mapping[Role, MatrixLike] | None = None,
    user_overrides: MatrixLike | None = None,
) -> PermissionMatrix:
    """Full resolved matrix over every known resource and action."""
    return {
        res.value: {
            act.value: can(role, res, act, user_overrides, role_permissions)
            for act in PermissionAction.known()
        }
        for res in Resource.known()
    }


def visible_nav_items(role: Role | str | None, permissions: MatrixLike | None) -> list[str]:
    """Hrefs the role may see, in NAV_ITEMS order.

    permissions is the role's effective matrix. Ungated destinations are shown
    to every admin-area role.
    """
    role = Role(role)
    if not role.has_admin_access:
        return []
    role_permissions = {role: permissions} if permissions is not None else {}
    return [
        href
        for href, resource in NAV_ITEMS
        if resource is None or can(role, resource, PermissionAction.VIEW, None, role_permissions)
    ]


def override_state(
    overrides: MatrixLike | None, resource: Resource | str, action: PermissionAction | str
) -> OverrideState:
    return OverrideState.from_value(
        _lookup(overrides, Resource(resource).value, PermissionAction(action).value)
    )


def toggle_override(
    overrides: MatrixLike | None,
    resource: Resource | str,
    action: PermissionAction | str,
    role_default: bool,
) -> PermissionMatrix:
    """Next override matrix after the operator clicks one cell.

    An explicit override is removed (back to inherited); an inherited cell gets
    the opposite of the role default. Names are normalized the way can() reads
    them; an unknown resource or action leaves the matrix unchanged. The input
    is never mutated.
    """
    source = overrides if isinstance(overrides, Mapping) else {}
    result: PermissionMatrix = {
        r: dict(actions) for r, actions in source.items() if isinstance(actions, Mapping)
    }
    resource, action = Resource(resource), PermissionAction(action)
    if resource is Resource.UNKNOWN or action is PermissionAction.UNKNOWN:
        return result
    res, act = resource.value, action.value

    actions = result.get(res, {})
    if act in actions:
        del actions[act]
    else:
        actions[act] = not role_default

    if actions:
        result[res] = actions
    else:
        result.pop(res, None)
    return result


def prune_overrides(overrides: object) -> PermissionMatrix:
    """Keep only well-formed bool cells; drop resources left empty."""
    result: PermissionMatrix = {}
    if not isinstance(overrides, Mapping):
        return result
    for resource, actions in overrides.items():
        if not isinstance(resource, str) or not isinstance(actions, Mapping):
            continue
        kept = {
            a: v for a, v in actions.items() if isinstance(a, str) and isinstance(v, bool)
        }
        if kept:
            result[resource] = kept
    return result


def merge_role_permissions(
    stored: Mapping[Role, MatrixLike] | None,
) -> dict[Role, PermissionMatrix]:
    """Shipped defaults overlaid with stored entries, per configurable role."""
    merged = {role: deepcopy(DEFAULT_ROLE_PERMISSIONS[role]) for role in CONFIGURABLE_ROLES}
    for role, matrix in (stored or {}).items():
        if role not in merged:
            continue
        for resource, actions in prune_overrides(matrix).items():
            merged[role].setdefault(resource, {}).update(actions)
    return merged


@dataclass(frozen=True)
class PermissionResolver:
    """Resolver bound to one actor for the lifetime of a request."""

    role: Role
    role_permissions: Mapping[Role, MatrixLike] = field(
        default_factory=lambda: DEFAULT_ROLE_PERMISSIONS
    )
    user_overrides: MatrixLike = field(default_factory=dict)

    def can(self, resource: Resource | str, action: PermissionAction | str) -> bool:
        return can(self.role, resource, action, self.user_overrides, self.role_permissions)

    def effective_permissions(self) -> PermissionMatrix:
        return effective_permissions(self.role, self.role_permissions, self.user_overrides)

    def visible_nav_items(self) -> list[str]:
        return visible_nav_items(self.role, self.effective_permissions())
