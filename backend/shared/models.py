"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class UserRole(str, Enum):
    """Roles a user can hold."""

    USER = "user"
    ADMIN = "admin"


class Identity(BaseModel):
    """
    Represents a registered user in the system.

    This is the public view of a user record: it never carries the
    password hash. It is what the token layer resolves on every request
    and what the movies module receives as the acting user.
    """

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="Normalized email address")
    role: UserRole = Field(default=UserRole.USER, description="User role")
    created_at: Optional[datetime] = Field(None, description="Account creation time")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
