"""
User repository for database access.

The credential store: lookups by email or id and a single insert. The
unique index on users.email is the final arbiter of registration races.
"""

import logging
from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.models import UserRole
from shared.repository import (
    BaseRepository,
    StoreError,
    is_invalid_identifier,
    is_unique_violation,
)
from .exceptions import EmailAlreadyExistsError
from .models import UserRecord

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user credential records.

    Emails are expected to be normalized by the caller.
    """

    table = "users"

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        """Get a user record by (normalized) email."""
        try:
            result = self._table().select("*").eq("email", email).limit(1).execute()
        except APIError as e:
            raise StoreError("find_by_email", self.table) from e
        row = self._first(result)
        return self._map_to_user(row) if row else None

    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        """Get a user record by id."""
        try:
            result = self._table().select("*").eq("id", user_id).limit(1).execute()
        except APIError as e:
            if is_invalid_identifier(e):
                return None
            raise StoreError("find_by_id", self.table) from e
        row = self._first(result)
        return self._map_to_user(row) if row else None

    def insert(self, email: str, password_hash: str, role: UserRole) -> UserRecord:
        """
        Insert a new user record.

        Raises:
            EmailAlreadyExistsError: If the email is already taken.
            StoreError: On any other store failure.
        """
        data = {
            "email": email,
            "password_hash": password_hash,
            "role": role.value,
        }
        try:
            result = self._table().insert(data).execute()
        except APIError as e:
            if is_unique_violation(e):
                raise EmailAlreadyExistsError() from e
            raise StoreError("insert", self.table) from e

        row = self._first(result)
        if row is None:
            raise StoreError("insert", self.table)
        return self._map_to_user(row)

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        """Map database row to UserRecord model."""
        return UserRecord(
            id=str(data["id"]),
            email=data["email"],
            password_hash=data["password_hash"],
            role=UserRole(data.get("role") or UserRole.USER.value),
            created_at=data.get("created_at"),
        )
