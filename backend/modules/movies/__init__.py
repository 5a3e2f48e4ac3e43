"""
Movies module.

Handles movie records and the owner-or-admin rule for mutations.

Public API:
- IMovieService: Interface for movie operations
- MovieService: Implementation backed by an IMovieStore
- can_mutate: Authorization policy for update and delete
- Movie, MovieInput, Category: Data models
"""

from .interfaces import IMovieService, IMovieStore
from .models import Movie, MovieInput, Category
from .policy import can_mutate, normalize_id
from .service import MovieService
from .validation import validate_movie, parse_movie
from .exceptions import MovieNotFoundError, MovieAccessDeniedError

__all__ = [
    # Interfaces
    "IMovieService",
    "IMovieStore",
    # Implementation
    "MovieService",
    "can_mutate",
    "normalize_id",
    "validate_movie",
    "parse_movie",
    # Models
    "Movie",
    "MovieInput",
    "Category",
    # Exceptions
    "MovieNotFoundError",
    "MovieAccessDeniedError",
]
