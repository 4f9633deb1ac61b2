"""Audit log API resource."""

import falcon.asgi

from storeadmin.application.ports import PermissionChecker
from storeadmin.domain.value_objects import PermissionAction, Resource
from storeadmin.interfaces.api.hooks import require_permission


class AuditLogsResource:
    """GET /v1/admin/audit-logs - newest first, keyset paginated."""

    def __init__(self, unit_of_work_factory: type, permission_checker: PermissionChecker) -> None:
        self._uow_factory = unit_of_work_factory
        self.permission_checker = permission_checker

    @require_permission(Resource.AUDIT, PermissionAction.VIEW)
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resource = req.get_param("resource")
        cursor = req.get_param("cursor")
        limit = req.get_param_as_int("limit") or 50
        limit = min(max(limit, 1), 200)

        async with self._uow_factory() as uow:
            entries, next_cursor = await uow.audit_logs.list(
                resource=resource, cursor=cursor, limit=limit
            )

        resp.media = {
            "items": [
                {
                    "id": str(e.id),
                    "user_id": e.user_id,
                    "action": e.action,
                    "resource": e.resource,
                    "record_id": e.record_id,
                    "record_title": e.record_title,
                    "details": e.details,
                    "created_at": e.created_at.isoformat(),
                }
                for e in entries
            ],
            "next_cursor": next_cursor,
        }
        resp.status = falcon.HTTP_200
