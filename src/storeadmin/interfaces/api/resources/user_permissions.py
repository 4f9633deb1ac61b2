"""Per-user permission override API resource."""

import falcon.asgi

from storeadmin.application.dto.actor import Actor
from storeadmin.application.use_cases.permission.get_user_permissions import (
    GetUserPermissionsUseCase,
)
from storeadmin.application.use_cases.permission.reset_user_overrides import (
    ResetUserOverridesUseCase,
)
from storeadmin.application.use_cases.permission.set_user_overrides import (
    SetUserOverridesUseCase,
)
from storeadmin.domain.exceptions import ValidationError
from storeadmin.interfaces.api.hooks import require_admin


class UserPermissionsResource:
    """GET/PUT/DELETE /v1/admin/users/{user_id}/permissions."""

    def __init__(
        self,
        get_user_permissions: GetUserPermissionsUseCase,
        set_user_overrides: SetUserOverridesUseCase,
        reset_user_overrides: ResetUserOverridesUseCase,
    ) -> None:
        self._get = get_user_permissions
        self._set = set_user_overrides
        self._reset = reset_user_overrides

    @require_admin()
    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        """Role matrix of the user's role plus the user's sparse overrides."""
        user = req.context.user
        result = await self._get.execute(Actor(user.user_id, user.role), user_id)
        resp.media = {
            "user_id": result.user_id,
            "role": result.role.value,
            "role_permissions": result.role_permissions,
            "user_overrides": result.user_overrides,
        }
        resp.status = falcon.HTTP_200

    @require_admin()
    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        """Replace overrides. Body: {"overrides": {resource: {action: bool}}}."""
        user = req.context.user
        body = await req.get_media()
        if not isinstance(body, dict):
            raise ValidationError("Body must be an object")
        saved = await self._set.execute(
            Actor(user.user_id, user.role), user_id, body.get("overrides")
        )
        resp.media = {"success": True, "overrides": saved}
        resp.status = falcon.HTTP_200

    @require_admin()
    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        """Reset the user to role defaults."""
        user = req.context.user
        await self._reset.execute(Actor(user.user_id, user.role), user_id)
        resp.media = {"success": True}
        resp.status = falcon.HTTP_200
