"""Domain errors raised by repositories and services."""


class ElectionError(Exception):
    """Base class for all domain-level failures."""

    default_message = "Election system error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(ElectionError):
    """Validation failed before touching storage."""

    default_message = "Invalid input"


class ResourceNotFoundError(ElectionError):
    """Lookup by key matched no rows."""

    default_message = "Resource not found"


class DuplicateResourceError(ElectionError):
    """Unique key already taken."""

    default_message = "Resource already exists"


class DatabaseOperationError(ElectionError):
    """Underlying DuckDB call failed."""

    default_message = "Database operation failed"
