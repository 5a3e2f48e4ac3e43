"""
Movies module data models.

MovieInput declares the field constraints shared by create and update;
an update is checked by merging the patch into the stored fields. Movie is the
stored record as returned to callers. JSON uses camelCase aliases
(releaseDate, ownerId); Python code uses the field names.
"""

from datetime import date, datetime
from enum import Enum
from typing import Annotated, Any, Optional
from pydantic import AnyUrl, BaseModel, ConfigDict, Field, field_validator


class Category(str, Enum):
    """Fixed set of movie categories."""

    ACTION = "action"
    COMEDY = "comedy"
    DRAMA = "drama"
    THRILLER = "thriller"


Title = Annotated[str, Field(min_length=2, max_length=120)]
Description = Annotated[str, Field(min_length=20, max_length=500)]
Rating = Annotated[int, Field(ge=1, le=5, strict=True)]


def _date_part(value: Any) -> Any:
    """Accept full ISO datetimes for release dates and keep the date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        except ValueError:
            return value
    return value


class MovieInput(BaseModel):
    """A complete, valid set of editable movie fields."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: Title
    description: Description
    release_date: date = Field(..., alias="releaseDate")
    rating: Rating
    category: Category
    actors: list[str] = Field(default_factory=list)
    poster: Optional[AnyUrl] = None

    @field_validator("release_date", mode="before")
    @classmethod
    def normalize_release_date(cls, value):
        return _date_part(value)


class Movie(BaseModel):
    """A stored movie owned by a user."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str
    release_date: date = Field(..., alias="releaseDate")
    rating: int
    category: Category
    actors: list[str] = Field(default_factory=list)
    poster: Optional[str] = None
    owner_id: str = Field(..., alias="ownerId")
    owner_email: Optional[str] = Field(None, alias="ownerEmail")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    def editable_fields(self) -> dict[str, Any]:
        """The fields a patch may touch, keyed by field name."""
        return self.model_dump(include=set(MovieInput.model_fields))
