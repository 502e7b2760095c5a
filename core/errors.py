# core/errors.py
"""Domain errors raised by repositories and services.

They propagate unchanged up to the API layer, where the exception
handlers registered in ``api.main`` translate them into the error
envelope ``{"status": "error", "message": "..."}`` and a status code.
"""

from typing import Optional


class DomainError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Raised when a request carries a malformed or unusable value."""


class InvalidIdentifierError(ValidationError):
    """Raised when an identifier does not have the store's identifier shape."""

    def __init__(self, identifier: object) -> None:
        self.identifier = identifier
        super().__init__(f"Invalid identifier: {identifier}")


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity: str, identifier: object, message: Optional[str] = None) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(message or f"{entity} with ID {identifier} not found")


class ConflictError(DomainError):
    """Raised when a write collides with a unique field of another record."""
