"""Custom exceptions for orderdesk."""


class OrderDeskError(Exception):
    """Base exception for all orderdesk errors."""

    pass


class NotFoundError(OrderDeskError):
    """Raised when a referenced entity id does not exist."""

    def __init__(self, entity: str, key: object, field: str = "id"):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found: {field}={key}")


class ConflictError(OrderDeskError):
    """Raised when a write would break a uniqueness or reference rule."""

    pass


class ValidationError(OrderDeskError):
    """Raised when a value is missing or outside its allowed set."""

    pass
