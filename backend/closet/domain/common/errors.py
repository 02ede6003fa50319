"""Domain error types."""
from typing import Any, Optional


class DomainError(Exception):
    """Base domain error.

    Every domain error knows the HTTP status it maps to and how to render
    itself as a JSON body with an ``error`` field.
    """

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to API response body."""
        return {"error": self.message}


class BadRequestError(DomainError):
    """Missing or invalid input."""
    status_code = 400


class AuthenticationError(DomainError):
    """Missing credential."""
    status_code = 401

    def __init__(self, message: str = "Access token required"):
        super().__init__(message)


class AuthorizationError(DomainError):
    """Valid caller, but not allowed to do this."""
    status_code = 403

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message)


class NotFoundError(DomainError):
    """Resource not found."""
    status_code = 404

    def __init__(self, resource: str, identifier: Optional[Any] = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class ConflictError(DomainError):
    """Uniqueness violation."""
    status_code = 409


class InvalidStateError(DomainError):
    """Operation not valid for the entity's current state."""
    status_code = 400


class InvalidOperationError(DomainError):
    """Operation not valid for this caller and entity combination."""
    status_code = 400


class InsufficientFundsError(DomainError):
    """Buttons balance too low for the requested purchase."""
    status_code = 400

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__("Insufficient buttons")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.message,
            "required": self.required,
            "available": self.available,
        }
