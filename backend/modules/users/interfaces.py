"""
Users module interfaces.

IIdentityService is what the auth module and the API layer depend on.
ICredentialStore is the persistence contract the service consumes; the
Supabase repository and the in-memory test store both satisfy it.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import Identity, UserRole
from .models import UserRecord


@runtime_checkable
class ICredentialStore(Protocol):
    """Persistence contract for user credential records."""

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        ...

    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        ...

    def insert(self, email: str, password_hash: str, role: UserRole) -> UserRecord:
        """Insert a record; raises EmailAlreadyExistsError on a duplicate email."""
        ...


@runtime_checkable
class IIdentityService(Protocol):
    """
    Interface for registration and credential verification.
    """

    async def register(
        self,
        email: str,
        password: str,
        role: Optional[UserRole] = None,
    ) -> Identity:
        """
        Register a new user.

        Args:
            email: Email address (normalized before storage)
            password: Plaintext password (hashed before storage)
            role: Optional role, defaults to user

        Returns:
            The stored Identity

        Raises:
            InvalidInputError: If the email or password is malformed
            EmailAlreadyExistsError: If the email is already registered
        """
        ...

    async def find_by_email(self, email: str) -> Identity:
        """
        Get a user by email.

        Raises:
            UserNotFoundError: If no user has this email
        """
        ...

    async def find_by_id(self, user_id: str) -> Identity:
        """
        Get a user by id.

        Raises:
            UserNotFoundError: If no user has this id
        """
        ...

    async def authenticate(self, email: str, password: str) -> Identity:
        """
        Verify an email/password pair.

        Raises:
            UserNotFoundError: If the email is unknown
            InvalidCredentialsError: If the password does not match
        """
        ...
