"""
Base exception classes for the Outreach backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps the bases to HTTP status codes (see api/errors.py).
"""

from typing import Optional, Any


class OutreachError(Exception):
    """
    Base exception for all Outreach errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(OutreachError):
    """Resource not found."""

    pass


class ValidationError(OutreachError):
    """Input validation failed."""

    pass


class ConflictError(OutreachError):
    """The request conflicts with the current state of a resource."""

    pass


class AuthenticationError(OutreachError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(OutreachError):
    """Authorization failed (insufficient permissions)."""

    pass


class ConfigurationError(OutreachError):
    """The server is missing configuration it needs to handle the request."""

    pass


class ExternalServiceError(OutreachError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class StoreError(ExternalServiceError):
    """The Supabase data store failed or timed out."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, service="supabase", code="STORE_ERROR", details=details)
        self.operation = operation
        if operation:
            self.details["operation"] = operation
