"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from pydantic import BaseModel, Field


class TokenClaims(BaseModel):
    """
    Decoded bearer token payload.

    The token only references the user; role and existence are looked
    up again on every request.
    """

    sub: str = Field(..., description="Subject (user ID)")
    email: str = Field(..., description="User's email")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")

    model_config = {"frozen": True, "extra": "ignore"}


class TokenResponse(BaseModel):
    """Response from a successful login."""

    token: str = Field(..., description="Signed bearer token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Validity window in seconds")
