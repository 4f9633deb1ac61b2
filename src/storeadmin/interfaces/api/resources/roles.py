"""Role permission matrix API resource."""

import falcon.asgi

from storeadmin.application.dto.actor import Actor
from storeadmin.application.use_cases.permission.get_role_permissions import (
    GetRolePermissionsUseCase,
)
from storeadmin.application.use_cases.permission.set_role_permissions import (
    SetRolePermissionsUseCase,
)
from storeadmin.interfaces.api.hooks import require_admin


class RolePermissionsResource:
    """GET/PUT /v1/admin/roles - matrices of the configurable roles."""

    def __init__(
        self,
        get_role_permissions: GetRolePermissionsUseCase,
        set_role_permissions: SetRolePermissionsUseCase,
    ) -> None:
        self._get = get_role_permissions
        self._set = set_role_permissions

    @require_admin()
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = req.context.user
        matrices = await self._get.execute(Actor(user.user_id, user.role))
        resp.media = {role.value: matrix for role, matrix in matrices.items()}
        resp.status = falcon.HTTP_200

    @require_admin()
    async def on_put(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Replace matrices. Body: {"EDITOR": {...}, "AUTHOR": {...}}."""
        user = req.context.user
        body = await req.get_media()
        saved = await self._set.execute(Actor(user.user_id, user.role), body)
        resp.media = {
            "success": True,
            "permissions": {role.value: matrix for role, matrix in saved.items()},
        }
        resp.status = falcon.HTTP_200
