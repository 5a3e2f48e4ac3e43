"""Tests for the Supabase movie repository."""

import pytest
from unittest.mock import MagicMock
from postgrest.exceptions import APIError

from modules.movies.repository import MovieRepository
from shared.repository import StoreError


def create_mock_movie_row(
    movie_id: str = "9a1f0c2e-6b7d-4e8f-a9b0-c1d2e3f4a5b6",
    owner_id: str = "4b0c4c6e-2a55-4c1e-9a59-3f1f7f0b9c11",
    **overrides,
) -> dict:
    """Helper to create a mock movies row."""
    row = {
        "id": movie_id,
        "title": "Movie 1",
        "description": "A long enough description for a movie",
        "release_date": "2024-05-01",
        "rating": 5,
        "category": "action",
        "actors": ["Actor 1"],
        "poster": None,
        "owner_id": owner_id,
        "created_at": "2024-05-01T12:00:00+00:00",
        "updated_at": "2024-05-01T12:00:00+00:00",
    }
    row.update(overrides)
    return row


def invalid_uuid_error() -> APIError:
    return APIError({"message": "invalid input syntax for type uuid", "code": "22P02"})


class TestMovieRepository:
    @pytest.fixture
    def db(self):
        return MagicMock()

    @pytest.fixture
    def repo(self, db):
        return MovieRepository(db)

    def test_find_one(self, repo, db):
        query = db.table.return_value.select.return_value.eq.return_value.limit.return_value
        query.execute.return_value.data = [create_mock_movie_row()]

        movie = repo.find_one("9a1f0c2e-6b7d-4e8f-a9b0-c1d2e3f4a5b6")

        assert movie.title == "Movie 1"
        assert movie.release_date.isoformat() == "2024-05-01"
        db.table.assert_called_with("movies")

    def test_find_one_missing(self, repo, db):
        query = db.table.return_value.select.return_value.eq.return_value.limit.return_value
        query.execute.return_value.data = []
        assert repo.find_one("9a1f0c2e-6b7d-4e8f-a9b0-c1d2e3f4a5b6") is None

    def test_find_one_malformed_id(self, repo, db):
        query = db.table.return_value.select.return_value.eq.return_value.limit.return_value
        query.execute.side_effect = invalid_uuid_error()
        assert repo.find_one("not-a-uuid") is None

    def test_find_one_store_failure(self, repo, db):
        query = db.table.return_value.select.return_value.eq.return_value.limit.return_value
        query.execute.side_effect = APIError({"message": "boom", "code": "XX000"})
        with pytest.raises(StoreError) as exc_info:
            repo.find_one("9a1f0c2e-6b7d-4e8f-a9b0-c1d2e3f4a5b6")
        assert exc_info.value.details == {"operation": "find_one", "table": "movies"}

    def test_find_many_all(self, repo, db):
        ordered = db.table.return_value.select.return_value.order.return_value.order.return_value
        ordered.execute.return_value.data = [
            create_mock_movie_row(movie_id="a", owner={"email": "owner@test.com"}),
            create_mock_movie_row(movie_id="b", actors=None),
        ]

        movies = repo.find_many()

        assert [m.id for m in movies] == ["a", "b"]
        assert movies[0].owner_email == "owner@test.com"
        assert movies[1].owner_email is None
        assert movies[1].actors == []
        db.table.return_value.select.assert_called_once_with("*, owner:users(email)")
        db.table.return_value.select.return_value.order.assert_called_with("created_at")
        db.table.return_value.select.return_value.eq.assert_not_called()

    def test_find_many_by_owner(self, repo, db):
        filtered = db.table.return_value.select.return_value.eq.return_value
        filtered.order.return_value.order.return_value.execute.return_value.data = []

        assert repo.find_many(owner_id="owner-1") == []
        db.table.return_value.select.return_value.eq.assert_called_with("owner_id", "owner-1")

    def test_find_many_malformed_owner(self, repo, db):
        filtered = db.table.return_value.select.return_value.eq.return_value
        filtered.order.return_value.order.return_value.execute.side_effect = invalid_uuid_error()
        assert repo.find_many(owner_id="not-a-uuid") == []

    def test_insert(self, repo, db):
        db.table.return_value.insert.return_value.execute.return_value.data = [
            create_mock_movie_row()
        ]
        data = {"title": "Movie 1"}

        movie = repo.insert(data)

        assert movie.owner_id == "4b0c4c6e-2a55-4c1e-9a59-3f1f7f0b9c11"
        db.table.return_value.insert.assert_called_once_with(data)

    def test_insert_returns_nothing(self, repo, db):
        db.table.return_value.insert.return_value.execute.return_value.data = []
        with pytest.raises(StoreError):
            repo.insert({"title": "Movie 1"})

    def test_update_in_place(self, repo, db):
        query = db.table.return_value.update.return_value.eq.return_value
        query.execute.return_value.data = [create_mock_movie_row(rating=2)]

        movie = repo.update_in_place("9a1f0c2e-6b7d-4e8f-a9b0-c1d2e3f4a5b6", {"rating": 2})

        assert movie.rating == 2
        db.table.return_value.update.assert_called_once_with({"rating": 2})

    def test_update_in_place_missing(self, repo, db):
        query = db.table.return_value.update.return_value.eq.return_value
        query.execute.return_value.data = []
        assert repo.update_in_place("9a1f0c2e-6b7d-4e8f-a9b0-c1d2e3f4a5b6", {"rating": 2}) is None

    def test_delete_by_id(self, repo, db):
        query = db.table.return_value.delete.return_value.eq.return_value
        query.execute.return_value.data = [create_mock_movie_row()]

        removed = repo.delete_by_id("9a1f0c2e-6b7d-4e8f-a9b0-c1d2e3f4a5b6")

        assert removed.id == "9a1f0c2e-6b7d-4e8f-a9b0-c1d2e3f4a5b6"
        query_eq = db.table.return_value.delete.return_value.eq
        query_eq.assert_called_once_with("id", "9a1f0c2e-6b7d-4e8f-a9b0-c1d2e3f4a5b6")

    def test_delete_by_id_malformed(self, repo, db):
        query = db.table.return_value.delete.return_value.eq.return_value
        query.execute.side_effect = invalid_uuid_error()
        assert repo.delete_by_id("nope") is None

    def test_delete_store_failure(self, repo, db):
        query = db.table.return_value.delete.return_value.eq.return_value
        query.execute.side_effect = APIError({"message": "boom", "code": "XX000"})
        with pytest.raises(StoreError):
            repo.delete_by_id("9a1f0c2e-6b7d-4e8f-a9b0-c1d2e3f4a5b6")

    def test_find_many_embeds_configured_users_table(self, db):
        repo = MovieRepository(db, table="films", users_table="accounts")
        ordered = db.table.return_value.select.return_value.order.return_value.order.return_value
        ordered.execute.return_value.data = [
            create_mock_movie_row(owner={"email": "owner@test.com"})
        ]

        movies = repo.find_many()

        assert movies[0].owner_email == "owner@test.com"
        db.table.assert_called_with("films")
        db.table.return_value.select.assert_called_once_with("*, owner:accounts(email)")

    def test_find_one_has_no_owner_email(self, repo, db):
        query = db.table.return_value.select.return_value.eq.return_value.limit.return_value
        query.execute.return_value.data = [create_mock_movie_row()]
        assert repo.find_one("9a1f0c2e-6b7d-4e8f-a9b0-c1d2e3f4a5b6").owner_email is None
