"""Application ports - interfaces for external adapters."""

from storeadmin.application.ports.permission_checker import PermissionChecker
from storeadmin.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "PermissionChecker",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
