"""
Structured input validation.

Field rules are declared on Pydantic models; this module runs a model
against raw input and turns Pydantic's error list into a flat list of
FieldViolation records that every module and the API layer share.
Fields are named as clients send them, so aliased fields report their
JSON name (releaseDate, not release_date).
"""

from typing import Any, Iterable, Mapping, Optional, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from .exceptions import ValidationError

M = TypeVar("M", bound=BaseModel)

# Location prefixes FastAPI adds to request errors
_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


class FieldViolation(BaseModel):
    """A single violated field constraint."""

    field: str
    constraint: str
    message: str

    model_config = {"frozen": True}


class InvalidInputError(ValidationError):
    """Raised when input does not satisfy the declared field constraints."""

    def __init__(self, violations: list[FieldViolation]):
        fields = ", ".join(sorted({v.field for v in violations})) or "input"
        super().__init__(
            f"Invalid input: {fields}",
            code="INVALID_INPUT",
            details={"violations": [v.model_dump() for v in violations]},
        )
        self.violations = violations


def json_field_names(model: type[BaseModel]) -> dict[str, str]:
    """Map field names to their JSON aliases, for aliased fields only."""
    return {name: info.alias for name, info in model.model_fields.items() if info.alias}


def violations_from_errors(
    errors: Iterable[Mapping[str, Any]],
    aliases: Optional[Mapping[str, str]] = None,
) -> list[FieldViolation]:
    """
    Convert Pydantic/FastAPI error dicts into FieldViolation records.

    Pydantic reports whichever key it found the value under, so a field
    given by name is renamed to its alias here.
    """
    violations = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        if loc and aliases:
            loc[0] = aliases.get(loc[0], loc[0])
        violations.append(
            FieldViolation(
                field=".".join(loc) or "__root__",
                constraint=str(error.get("type", "invalid")),
                message=str(error.get("msg", "Invalid value")),
            )
        )
    return violations


def validate_model(
    model: type[M],
    data: Mapping[str, Any],
) -> tuple[Optional[M], list[FieldViolation]]:
    """
    Validate raw data against a model.

    Returns:
        (instance, []) when the data is valid, (None, violations) otherwise.
    """
    try:
        return model.model_validate(dict(data)), []
    except PydanticValidationError as e:
        return None, violations_from_errors(e.errors(), json_field_names(model))


def parse_or_raise(model: type[M], data: Mapping[str, Any]) -> M:
    """Validate raw data against a model, raising InvalidInputError on failure."""
    try:
        return model.model_validate(dict(data))
    except PydanticValidationError as e:
        raise InvalidInputError(violations_from_errors(e.errors(), json_field_names(model))) from e
