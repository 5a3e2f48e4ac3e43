"""
Movie input validation.

Runs once at the service boundary, before any store call. Payload keys
may use either field names (release_date) or JSON aliases (releaseDate);
keys that are not editable fields, including id and ownerId, are dropped.
"""

from typing import Any, Mapping

from shared.validation import FieldViolation, parse_or_raise, validate_model
from .models import MovieInput

EDITABLE_FIELDS = tuple(MovieInput.model_fields)

_FIELD_BY_KEY: dict[str, str] = {}
for _name, _info in MovieInput.model_fields.items():
    _FIELD_BY_KEY[_name] = _name
    if _info.alias:
        _FIELD_BY_KEY[_info.alias] = _name


def editable_payload(data: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only editable fields, keyed by field name."""
    payload = {}
    for key, value in data.items():
        name = _FIELD_BY_KEY.get(key)
        if name is not None:
            payload[name] = value
    return payload


def validate_movie(data: Mapping[str, Any]) -> list[FieldViolation]:
    """Return every violated constraint for a full set of movie fields."""
    _, violations = validate_model(MovieInput, editable_payload(data))
    return violations


def parse_movie(data: Mapping[str, Any]) -> MovieInput:
    """
    Validate a full set of movie fields.

    Raises:
        InvalidInputError: With the list of violated constraints.
    """
    return parse_or_raise(MovieInput, editable_payload(data))
