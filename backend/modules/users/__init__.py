"""
Users module.

Handles registration, credential storage and credential verification.

Public API:
- IIdentityService: Interface for identity operations
- IdentityService: Implementation backed by an ICredentialStore
- PasswordHasher: bcrypt hashing used by the service
- Users exceptions: EmailAlreadyExistsError, UserNotFoundError, etc.
"""

from .interfaces import IIdentityService, ICredentialStore
from .models import UserRecord, RegisterRequest, LoginRequest, normalize_email
from .hashing import PasswordHasher
from .service import IdentityService
from .exceptions import (
    EmailAlreadyExistsError,
    UserNotFoundError,
    InvalidCredentialsError,
    PasswordHashError,
)

__all__ = [
    # Interfaces
    "IIdentityService",
    "ICredentialStore",
    # Implementation
    "IdentityService",
    "PasswordHasher",
    # Models
    "UserRecord",
    "RegisterRequest",
    "LoginRequest",
    "normalize_email",
    # Exceptions
    "EmailAlreadyExistsError",
    "UserNotFoundError",
    "InvalidCredentialsError",
    "PasswordHashError",
]
