"""Falcon hooks enforcing admin-area authorization before responders run."""

import falcon

from storeadmin.domain.exceptions import AuthenticationRequired, PermissionDenied
from storeadmin.domain.value_objects import PermissionAction, Resource, Role

DENIED_MESSAGE = (
    "You don't have permission to perform this action. Please contact the administrator."
)


def _admin_area_user(req):
    user = getattr(req.context, "user", None)
    if not user or not Role(user.role).has_admin_access:
        raise AuthenticationRequired("Unauthorized")
    return user


def require_permission(resource: Resource, action: PermissionAction):
    """Responder decorator: caller must hold resource:action.

    The decorated resource must expose a permission_checker attribute. The
    resolved PermissionResolver is left on req.context.permissions.
    """

    async def hook(req, resp, handler, params) -> None:
        user = _admin_area_user(req)
        resolver = await handler.permission_checker.resolver_for(user.user_id, user.role)
        if not resolver.can(resource, action):
            raise PermissionDenied(DENIED_MESSAGE)
        req.context.permissions = resolver

    return falcon.before(hook)


def require_admin():
    """Responder decorator: caller must be ADMIN. Anyone else gets 401."""

    async def hook(req, resp, handler, params) -> None:
        user = _admin_area_user(req)
        if Role(user.role) is not Role.ADMIN:
            raise AuthenticationRequired("Unauthorized")

    return falcon.before(hook)


def require_admin_area():
    """Responder decorator: caller must be ADMIN, EDITOR or AUTHOR."""

    async def hook(req, resp, handler, params) -> None:
        _admin_area_user(req)

    return falcon.before(hook)
