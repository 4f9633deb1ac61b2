"""Set role permissions use case."""

import logging
from collections.abc import Mapping

from storeadmin.application.audit import record_audit
from storeadmin.application.dto.actor import Actor
from storeadmin.application.permission_store import PermissionStore
from storeadmin.application.use_cases.permission._guards import require_admin
from storeadmin.domain.exceptions import ValidationError
from storeadmin.domain.value_objects import CONFIGURABLE_ROLES, PermissionMatrix, Resource, Role

logger = logging.getLogger(__name__)


class SetRolePermissionsUseCase:
    """Replace the stored matrices of EDITOR and AUTHOR.

    A configurable role missing from the body is reset to shipped defaults.
    ADMIN, SUBSCRIBER and unknown role keys are dropped.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self, actor: Actor, body: Mapping[str, object]
    ) -> dict[Role, PermissionMatrix]:
        require_admin(actor)
        if not isinstance(body, Mapping):
            raise ValidationError("Body must be an object keyed by role")

        submitted: dict[Role, object] = {}
        for key, matrix in body.items():
            role = Role(key)
            if role not in CONFIGURABLE_ROLES:
                logger.warning("Ignoring permissions for non-configurable role %r", key)
                continue
            submitted[role] = matrix

        saved: dict[Role, PermissionMatrix] = {}
        async with self._uow_factory() as uow:
            store = PermissionStore(uow)
            for role in CONFIGURABLE_ROLES:
                matrix = submitted.get(role)
                saved[role] = await store.set_role_permissions(
                    role, matrix if isinstance(matrix, Mapping) else {}
                )
            await record_audit(
                uow,
                user_id=actor.user_id,
                action="edit",
                resource=Resource.ROLES.value,
                record_id="role-permissions",
                record_title="Role Permissions",
                details={r.value: m for r, m in saved.items()},
            )
        logger.info("Role permissions updated by %s", actor.user_id)
        return saved
