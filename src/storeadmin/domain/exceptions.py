"""Domain exceptions."""


class StoreAdminError(Exception):
    """Base exception for storeadmin."""

    pass


class PermissionDenied(StoreAdminError):
    """User does not have permission for the requested action."""

    pass


class NotFound(StoreAdminError):
    """Requested entity was not found."""

    def __init__(self, entity: str, key: object) -> None:
        super().__init__(f"{entity} not found: {key}")
        self.entity = entity
        self.key = key


class ValidationError(StoreAdminError):
    """Validation failed for input data."""

    pass


class MatrixUnavailable(StoreAdminError):
    """Permission store could not be read."""

    pass


class AuthenticationRequired(StoreAdminError):
    """Caller is anonymous or has no admin-area role."""

    pass
