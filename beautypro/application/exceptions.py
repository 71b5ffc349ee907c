class SalonError(Exception):
    """Base class for recoverable, user-facing failures."""
    pass


class NotFoundError(SalonError):
    """Raised when an operation targets a record id that does not exist."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class ValidationError(SalonError):
    """Raised when form input cannot be accepted. Nothing is mutated."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class InvalidTransitionError(SalonError):
    """Raised by the strict transition policy."""
    pass


class SchedulingConflictError(SalonError):
    """Raised when overlap detection is enabled and a professional is already booked."""
    pass
