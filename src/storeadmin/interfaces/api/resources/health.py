"""Health check endpoints."""

import logging

import falcon.asgi
import psycopg

from storeadmin.domain.exceptions import MatrixUnavailable

logger = logging.getLogger(__name__)


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, unit_of_work_factory: type | None = None) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (permission store reachable)."""
        if self._uow_factory is not None:
            try:
                async with self._uow_factory() as uow:
                    await uow.role_permissions.list_all()
            except (psycopg.Error, OSError, MatrixUnavailable) as e:
                logger.warning("Readiness check failed: %s", e)
                resp.media = {"status": "unavailable"}
                resp.status = falcon.HTTP_503
                return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
