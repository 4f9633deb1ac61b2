"""Current user's effective permissions."""

import falcon.asgi

from storeadmin.application.ports import PermissionChecker
from storeadmin.interfaces.api.hooks import require_admin_area


class MePermissionsResource:
    """GET /v1/admin/me/permissions - resolved matrix and sidebar for the caller."""

    def __init__(self, permission_checker: PermissionChecker) -> None:
        self.permission_checker = permission_checker

    @require_admin_area()
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = req.context.user
        resolver = await self.permission_checker.resolver_for(user.user_id, user.role)
        resp.media = {
            "user_id": user.user_id,
            "role": resolver.role.value,
            "permissions": resolver.effective_permissions(),
            "nav": resolver.visible_nav_items(),
        }
        resp.status = falcon.HTTP_200
