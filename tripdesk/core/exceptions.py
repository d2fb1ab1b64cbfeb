"""Domain exceptions shared by the use cases and the HTTP layer."""


class DomainError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(DomainError):
    """Raise to map to HTTP 404."""

    def __init__(self, message: str = "Reservation not found"):
        super().__init__(message, 404)


class ValidationError(DomainError):
    """Raise to map to HTTP 422 (validation error)."""

    def __init__(self, message: str):
        super().__init__(message, 422)


class StorageUnavailableError(DomainError):
    """The backing store could not be reached."""

    def __init__(self, message: str = "Storage unavailable"):
        super().__init__(message, 503)
