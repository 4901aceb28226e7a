class ProductApiError(Exception):
    """Base class for errors raised by the product service."""


class ConfigurationError(ProductApiError):
    """Raised when required configuration is missing or invalid."""


class ProductValidationError(ProductApiError, ValueError):
    """Client supplied product fields failed validation.

    Subclasses ValueError so pydantic validators can raise it as-is.
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}")

    @property
    def message(self) -> str:
        return f"Invalid {self.field}"


class StoreError(ProductApiError):
    """Persisting or querying products failed."""


class DatabaseConnectionError(StoreError):
    """The database could not be reached."""
