"""Permission checker implementation - resolves against the permission store."""

import logging

import psycopg

from storeadmin.application.permission_store import PermissionStore
from storeadmin.domain.exceptions import MatrixUnavailable
from storeadmin.domain.services.permission_resolver import (
    DEFAULT_ROLE_PERMISSIONS,
    PermissionResolver,
)
from storeadmin.domain.value_objects import PermissionAction, Resource, Role

logger = logging.getLogger(__name__)

STORE_READ_ERRORS = (psycopg.Error, OSError, MatrixUnavailable)


class StorePermissionChecker:
    """Builds a per-request resolver from stored role matrices and user overrides.

    A store read failure falls back to the shipped defaults without overrides.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def resolver_for(self, user_id: str, role: Role) -> PermissionResolver:
        """Resolver for user_id acting with role."""
        role = Role(role)
        if not role.is_configurable:
            return PermissionResolver(role=role)

        try:
            async with self._uow_factory() as uow:
                store = PermissionStore(uow)
                role_permissions = await store.get_role_permissions()
                overrides = await store.get_user_overrides(user_id)
        except STORE_READ_ERRORS as e:
            logger.warning(
                "Permission store unavailable, using default permissions for %s: %s", role, e
            )
            return PermissionResolver(role=role, role_permissions=DEFAULT_ROLE_PERMISSIONS)

        return PermissionResolver(
            role=role, role_permissions=role_permissions, user_overrides=overrides
        )

    async def check(
        self, user_id: str, role: Role, resource: Resource, action: PermissionAction
    ) -> bool:
        """Check if user has action on resource."""
        resolver = await self.resolver_for(user_id, role)
        return resolver.can(resource, action)
