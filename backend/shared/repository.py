"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

from typing import Any, Optional, TypeVar, Generic
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import InternalError


T = TypeVar("T")

# PostgreSQL SQLSTATE codes
UNIQUE_VIOLATION = "23505"
INVALID_TEXT_REPRESENTATION = "22P02"  # e.g. a malformed uuid in a filter


class StoreError(InternalError):
    """Raised when the document store fails unexpectedly."""

    def __init__(self, operation: str, table: str):
        super().__init__(
            f"Store operation failed: {operation} on {table}",
            code="STORE_ERROR",
            details={"operation": operation, "table": table},
        )


def is_unique_violation(error: APIError) -> bool:
    """Check whether a PostgREST error is a unique constraint violation."""
    return str(getattr(error, "code", "")) == UNIQUE_VIOLATION


def is_invalid_identifier(error: APIError) -> bool:
    """Check whether a PostgREST error was caused by a malformed id filter."""
    return str(getattr(error, "code", "")) == INVALID_TEXT_REPRESENTATION


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class MovieRepository(BaseRepository[Movie]):
            table = "movies"

            def find_one(self, movie_id: str) -> Optional[Movie]:
                result = self._table().select("*").eq("id", movie_id).execute()
                row = self._first(result)
                return self._map_to_movie(row) if row else None
    """

    table: str = ""

    def __init__(self, db: Client, table: Optional[str] = None) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
            table: Optional table name overriding the class default.
        """
        self._db = db
        if table:
            self.table = table

    def _table(self):
        return self._db.table(self.table)

    @staticmethod
    def _first(result: Any) -> Optional[dict[str, Any]]:
        """Return the first row of a PostgREST response, or None."""
        if not result.data:
            return None
        return result.data[0]
