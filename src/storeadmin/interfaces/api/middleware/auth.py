"""Auth middleware - resolves the caller from a bearer token."""

from dataclasses import dataclass

import falcon.asgi

from storeadmin.domain.value_objects import Role


@dataclass(frozen=True)
class RequestUser:
    """User from request context."""

    user_id: str
    role: Role
    email: str | None = None
    username: str | None = None


ANONYMOUS = RequestUser(user_id="anonymous", role=Role.SUBSCRIBER)


class AuthMiddleware:
    """Middleware that introspects the bearer token and sets req.context.user.

    Without a bearer token the caller is anonymous (SUBSCRIBER). An invalid
    token leaves req.context.user as None. Resources with ``auth_exempt = True``
    check their own credentials, so their bearer is never introspected.
    """

    def __init__(self, keycloak_provider=None) -> None:
        self._keycloak = keycloak_provider

    async def process_resource(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource: object,
        params: dict,
    ) -> None:
        """Extract user from Authorization header."""
        req.context.user = None
        if getattr(resource, "auth_exempt", False):
            return

        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer "):
            req.context.user = ANONYMOUS
            return

        if self._keycloak:
            user = await self._keycloak.decode_token(auth[7:])
            if user:
                req.context.user = RequestUser(
                    user_id=user.user_id,
                    role=user.role,
                    email=user.email,
                    username=user.username,
                )
