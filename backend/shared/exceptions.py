"""
Base exception classes for the Marquee backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to a single HTTP status, so client code
can branch on the error kind rather than the message text.
"""

from typing import Optional, Any


class MarqueeError(Exception):
    """
    Base exception for all Marquee errors.

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


class NotFoundError(MarqueeError):
    """Resource not found."""

    pass


class ConflictError(MarqueeError):
    """Resource already exists."""

    pass


class ValidationError(MarqueeError):
    """Input validation failed."""

    pass


class AuthenticationError(MarqueeError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(MarqueeError):
    """Authorization failed (insufficient permissions)."""

    pass


class InternalError(MarqueeError):
    """
    Unexpected failure in a store or the password hasher.

    The original exception is chained with ``raise ... from`` and is
    never copied into ``details``.
    """

    pass
