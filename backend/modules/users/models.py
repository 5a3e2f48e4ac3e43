"""
Users module data models.

UserRecord is the stored credential record and stays inside this module.
Everything handed to other modules is a shared.models.Identity.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from shared.models import Identity, UserRole

PASSWORD_MIN_LENGTH = 8
# bcrypt only looks at the first 72 bytes and rejects longer input
PASSWORD_MAX_BYTES = 72


def normalize_email(email: str) -> str:
    """Trim and lower-case an email address."""
    return (email or "").strip().lower()


class UserRecord(BaseModel):
    """A stored user, including the password hash."""

    id: str
    email: str
    password_hash: str
    role: UserRole = UserRole.USER
    created_at: Optional[datetime] = None

    def to_identity(self) -> Identity:
        """Public view of the record, without the password hash."""
        return Identity(
            id=self.id,
            email=self.email,
            role=self.role,
            created_at=self.created_at,
        )


class Credentials(BaseModel):
    """Email and plaintext password submitted by a caller. Never persisted."""

    email: EmailStr = Field(..., description="The email address of the user")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        description="The password of the user",
    )

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email_field(cls, value):
        return normalize_email(value) if isinstance(value, str) else value

    @field_validator("password")
    @classmethod
    def password_fits_hasher(cls, value: str) -> str:
        if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes long")
        return value


class RegisterRequest(Credentials):
    """Request body for registration."""

    role: Optional[UserRole] = Field(None, description="The role of the user")


class LoginRequest(Credentials):
    """Request body for login."""

    pass
