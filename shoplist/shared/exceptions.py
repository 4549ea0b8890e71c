"""
Base exception classes for shoplist.

Each module should define its own exceptions that inherit from these bases.
Stores catch ShoplistError subclasses at the action boundary and surface
their message through the store's error field.
"""

from typing import Optional, Any


class ShoplistError(Exception):
    """
    Base exception for all shoplist errors.

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
        """Convert exception to a dictionary for logging or display."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(ShoplistError):
    """Resource not found."""

    pass


class ValidationError(ShoplistError):
    """Input validation failed."""

    pass


class AuthenticationError(ShoplistError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class ExternalServiceError(ShoplistError):
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
