"""Daily notification cron endpoint."""

import hmac
import logging

import falcon.asgi

from storeadmin.application.use_cases.notification.process_reminders import (
    ProcessRemindersUseCase,
)
from storeadmin.application.use_cases.notification.process_templates import (
    ProcessTemplatesUseCase,
)

logger = logging.getLogger(__name__)


class CronNotificationsResource:
    """GET /v1/cron/notifications - fire due templates, then coupon reminders.

    Called once a day by an external scheduler with
    ``Authorization: Bearer <CRON_SECRET>``.
    """

    auth_exempt = True

    def __init__(
        self,
        process_templates: ProcessTemplatesUseCase,
        process_reminders: ProcessRemindersUseCase,
        cron_secret: str,
    ) -> None:
        self._process_templates = process_templates
        self._process_reminders = process_reminders
        self._cron_secret = cron_secret

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        if not self._cron_secret:
            logger.error("CRON_SECRET is not configured")
            resp.status = falcon.HTTP_500
            resp.media = {"error": "CRON_SECRET is not configured"}
            return

        expected = f"Bearer {self._cron_secret}"
        provided = (req.get_header("Authorization") or "").encode()
        if not hmac.compare_digest(provided, expected.encode()):
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        templates = await self._process_templates.execute()
        reminders = await self._process_reminders.execute()
        resp.media = {
            "success": True,
            "templates": {
                "processed": templates.processed,
                "sent": templates.sent,
                "coupons_created": templates.coupons_created,
                "errors": templates.errors,
            },
            "reminders": {"sent": reminders.sent, "errors": reminders.errors},
        }
        resp.status = falcon.HTTP_200
