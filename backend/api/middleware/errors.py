"""
Exception handlers.

Translates domain errors into HTTP responses. Each error kind maps to one
stable status; the body is the error's to_dict() payload.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import (
    MarqueeError,
    NotFoundError,
    ConflictError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    InternalError,
)
from shared.validation import InvalidInputError, violations_from_errors

logger = logging.getLogger(__name__)

# Most specific first
STATUS_BY_KIND: list[tuple[type[MarqueeError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (InternalError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(error: MarqueeError) -> int:
    """HTTP status for a domain error."""
    for kind, code in STATUS_BY_KIND:
        if isinstance(error, kind):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def marquee_error_handler(request: Request, exc: MarqueeError) -> JSONResponse:
    code = status_for(exc)
    if code >= 500:
        logger.error(
            f"Internal error on {request.method} {request.url.path}: {exc.code}",
            exc_info=exc,
        )

    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(status_code=code, content=exc.to_dict(), headers=headers)


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Render FastAPI request validation errors in the INVALID_INPUT shape."""
    error = InvalidInputError(violations_from_errors(exc.errors()))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain error handlers to an application."""
    app.add_exception_handler(MarqueeError, marquee_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
