"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, InternalError


class InvalidTokenError(AuthenticationError):
    """Raised when a token is malformed, tampered with, or references no user."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a token's validity window has elapsed."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class TokenConfigurationError(InternalError):
    """Raised when the server has no signing secret configured."""

    def __init__(self):
        super().__init__(
            "Server authentication not configured",
            code="AUTH_NOT_CONFIGURED",
        )
