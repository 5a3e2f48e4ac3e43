"""
Identity service implementation.

Registration and credential verification against the credential store.
"""

import logging
from typing import Optional

from shared.models import Identity, UserRole
from shared.validation import parse_or_raise

from .exceptions import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from .hashing import PasswordHasher
from .interfaces import ICredentialStore, IIdentityService
from .models import RegisterRequest, normalize_email

logger = logging.getLogger(__name__)


class IdentityService(IIdentityService):
    """
    Implementation of the identity service.

    Collaborators are passed in explicitly: a credential store and a
    password hasher.
    """

    def __init__(self, store: ICredentialStore, hasher: PasswordHasher):
        self._store = store
        self._hasher = hasher

    async def register(
        self,
        email: str,
        password: str,
        role: Optional[UserRole] = None,
    ) -> Identity:
        """
        Register a new user.

        The existence check is only a fast path: two concurrent requests can
        both pass it, so the store's unique constraint decides the race and
        the loser gets EmailAlreadyExistsError from insert().
        """
        request = parse_or_raise(
            RegisterRequest,
            {"email": email, "password": password, "role": role},
        )
        email = normalize_email(request.email)

        if self._store.find_by_email(email) is not None:
            logger.info(f"Registration rejected, email already exists: {email}")
            raise EmailAlreadyExistsError()

        # Self-assigned admin is accepted, but leave a trail
        resolved_role = request.role or UserRole.USER
        if resolved_role == UserRole.ADMIN:
            logger.warning(f"User registered with self-assigned admin role: {email}")

        password_hash = await self._hasher.hash_async(request.password)

        try:
            record = self._store.insert(email, password_hash, resolved_role)
        except EmailAlreadyExistsError:
            logger.info(f"Registration lost a race on email: {email}")
            raise

        logger.info(f"Registered user {record.id} ({email})")
        return record.to_identity()

    async def find_by_email(self, email: str) -> Identity:
        """Get a user by email."""
        record = self._store.find_by_email(normalize_email(email))
        if record is None:
            raise UserNotFoundError()
        return record.to_identity()

    async def find_by_id(self, user_id: str) -> Identity:
        """Get a user by id."""
        record = self._store.find_by_id(str(user_id))
        if record is None:
            raise UserNotFoundError()
        return record.to_identity()

    async def authenticate(self, email: str, password: str) -> Identity:
        """Verify an email/password pair and return the matching Identity."""
        email = normalize_email(email)
        record = self._store.find_by_email(email)
        if record is None:
            logger.info(f"Login failed, unknown email: {email}")
            raise UserNotFoundError()

        if not await self._hasher.verify_async(password or "", record.password_hash):
            logger.info(f"Login failed, invalid password for: {email}")
            raise InvalidCredentialsError()

        return record.to_identity()
