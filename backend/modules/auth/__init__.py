"""
Authentication module.

Issues and verifies stateless bearer tokens and resolves the caller's
Identity on each request.

Public API:
- ITokenService: Interface for token operations
- TokenService: HS256 JWT implementation
- TokenClaims: Decoded token payload
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import ITokenService
from .models import TokenClaims, TokenResponse
from .service import TokenService
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    TokenConfigurationError,
)

__all__ = [
    # Interface
    "ITokenService",
    # Implementation
    "TokenService",
    # Models
    "TokenClaims",
    "TokenResponse",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "TokenConfigurationError",
]
