"""
Movie repository for database access.

Encapsulates all Supabase queries and data mapping for the movies table.
Each mutation is a single store call, so a request abandoned mid-flight
never leaves a half-written record.
"""

from typing import Optional, Any

from postgrest.exceptions import APIError
from supabase import Client

from shared.repository import BaseRepository, StoreError, is_invalid_identifier
from .models import Movie


class MovieRepository(BaseRepository[Movie]):
    """
    Repository for movie data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying ownership.
    """

    table = "movies"

    def __init__(
        self,
        db: Client,
        table: Optional[str] = None,
        users_table: str = "users",
    ) -> None:
        super().__init__(db, table)
        self.users_table = users_table

    def find_one(self, movie_id: str) -> Optional[Movie]:
        """
        Get a movie by ID.

        A malformed id cannot match any row and is treated as not found.
        """
        try:
            result = self._table().select("*").eq("id", movie_id).limit(1).execute()
        except APIError as e:
            if is_invalid_identifier(e):
                return None
            raise StoreError("find_one", self.table) from e
        row = self._first(result)
        return self._map_to_movie(row) if row else None

    def find_many(self, owner_id: Optional[str] = None) -> list[Movie]:
        """
        List movies in storage order, optionally filtered by owner.

        Each movie carries its owner's email, embedded from the users table.
        """
        query = self._table().select(f"*, owner:{self.users_table}(email)")
        if owner_id is not None:
            query = query.eq("owner_id", owner_id)
        try:
            result = query.order("created_at").order("id").execute()
        except APIError as e:
            if is_invalid_identifier(e):
                return []
            raise StoreError("find_many", self.table) from e
        return [self._map_to_movie(row) for row in result.data]

    def insert(self, data: dict[str, Any]) -> Movie:
        """Insert a movie and return the stored record."""
        try:
            result = self._table().insert(data).execute()
        except APIError as e:
            raise StoreError("insert", self.table) from e
        row = self._first(result)
        if row is None:
            raise StoreError("insert", self.table)
        return self._map_to_movie(row)

    def update_in_place(self, movie_id: str, fields: dict[str, Any]) -> Optional[Movie]:
        """
        Apply the given fields to one movie.

        Returns:
            The updated movie, or None if it no longer exists.
        """
        try:
            result = self._table().update(fields).eq("id", movie_id).execute()
        except APIError as e:
            if is_invalid_identifier(e):
                return None
            raise StoreError("update_in_place", self.table) from e
        row = self._first(result)
        return self._map_to_movie(row) if row else None

    def delete_by_id(self, movie_id: str) -> Optional[Movie]:
        """
        Delete one movie.

        Returns:
            The removed movie, or None if nothing was deleted.
        """
        try:
            result = self._table().delete().eq("id", movie_id).execute()
        except APIError as e:
            if is_invalid_identifier(e):
                return None
            raise StoreError("delete_by_id", self.table) from e
        row = self._first(result)
        return self._map_to_movie(row) if row else None

    def _map_to_movie(self, data: dict[str, Any]) -> Movie:
        """Map database row to Movie model."""
        return Movie(
            id=str(data["id"]),
            title=data["title"],
            description=data["description"],
            release_date=data["release_date"],
            rating=data["rating"],
            category=data["category"],
            actors=data.get("actors") or [],
            poster=data.get("poster"),
            owner_id=str(data["owner_id"]),
            owner_email=(data.get("owner") or {}).get("email"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
