"""Actor guards for permission administration."""

from storeadmin.application.dto.actor import Actor
from storeadmin.domain.exceptions import PermissionDenied
from storeadmin.domain.value_objects import Role


def require_admin(actor: Actor) -> None:
    """Only ADMIN manages roles and user overrides."""
    if Role(actor.role) is not Role.ADMIN:
        raise PermissionDenied("Only administrators can manage permissions")
