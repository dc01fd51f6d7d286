class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidPeriodError(ValidationError):
    """Raised when a period token is not one of the supported forms."""


class NotFoundError(DomainError):
    """Raised when a referenced teacher does not exist."""
