"""
Error response models.

Standardized error responses for the API. The body mirrors
MarqueeError.to_dict().
"""

from pydantic import BaseModel, Field
from typing import Any


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


# OpenAPI documentation for the error statuses the routes can produce
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
    401: {"model": ErrorResponse, "description": "Missing, invalid or expired credentials"},
    403: {"model": ErrorResponse, "description": "Not the owner and not an admin"},
    404: {"model": ErrorResponse, "description": "Not found"},
    409: {"model": ErrorResponse, "description": "Already exists"},
}
