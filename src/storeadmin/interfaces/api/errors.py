"""Error handlers mapping domain exceptions to JSON responses."""

import logging

import falcon
import falcon.asgi

from storeadmin.domain.exceptions import (
    AuthenticationRequired,
    NotFound,
    PermissionDenied,
    ValidationError,
)

logger = logging.getLogger(__name__)


def _handler(status: str):
    async def handle(req, resp, ex, params) -> None:
        resp.status = status
        resp.media = {"error": str(ex)}

    return handle


async def handle_unexpected(req, resp, ex, params) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Internal server error"}


def register_error_handlers(app: falcon.asgi.App) -> None:
    """Install handlers; Falcon picks the most specific one by exception MRO."""
    app.add_error_handler(Exception, handle_unexpected)
    app.add_error_handler(AuthenticationRequired, _handler(falcon.HTTP_401))
    app.add_error_handler(PermissionDenied, _handler(falcon.HTTP_403))
    app.add_error_handler(NotFound, _handler(falcon.HTTP_404))
    app.add_error_handler(ValidationError, _handler(falcon.HTTP_400))
