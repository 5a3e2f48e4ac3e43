"""
Users module exceptions.

Messages stay generic: none of them carries the password, the stored hash,
or a hint about which half of a credential pair was wrong beyond the error
kind itself.
"""

from shared.exceptions import (
    AuthenticationError,
    ConflictError,
    InternalError,
    NotFoundError,
)


class EmailAlreadyExistsError(ConflictError):
    """Raised when registering an email that is already taken."""

    def __init__(self):
        super().__init__("User already exists", code="EMAIL_ALREADY_EXISTS")


class UserNotFoundError(NotFoundError):
    """Raised when no user matches the lookup."""

    def __init__(self):
        super().__init__("User not found", code="USER_NOT_FOUND")


class InvalidCredentialsError(AuthenticationError):
    """Raised when the password does not match the stored hash."""

    def __init__(self):
        super().__init__("Invalid credentials", code="INVALID_CREDENTIALS")


class PasswordHashError(InternalError):
    """Raised when the password hasher fails."""

    def __init__(self):
        super().__init__("Password hashing failed", code="PASSWORD_HASH_FAILED")
