"""
Movies module exceptions.
"""

from shared.exceptions import NotFoundError, AuthorizationError


class MovieNotFoundError(NotFoundError):
    """Raised when a movie is not found."""

    def __init__(self, movie_id: str):
        super().__init__(
            "Movie not found",
            code="MOVIE_NOT_FOUND",
            details={"movie_id": movie_id},
        )


class MovieAccessDeniedError(AuthorizationError):
    """Raised when a user may not update or delete a movie."""

    def __init__(self, movie_id: str):
        super().__init__(
            "You are not authorized to update or delete this movie",
            code="FORBIDDEN",
            details={"movie_id": movie_id},
        )
