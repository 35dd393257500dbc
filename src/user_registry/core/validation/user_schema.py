"""Schemas for user payloads and the create/update validators."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    StringConstraints,
    ValidationError,
)
from pydantic.alias_generators import to_camel

from user_registry.core.validation.issues import (
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
    issues_from_errors,
)

USER_MESSAGES: dict[tuple[str, str], str] = {
    ("name", "string_too_short"): "Name must be at least 2 characters long",
    ("name", "string_too_long"): "Name must be less than 100 characters",
    ("ext", "string_too_short"): "Phone country code is required",
    ("phone", "string_too_short"): "Phone number must be at least 5 characters long",
    ("email", "value_error"): "Please provide a valid email address",
    ("dateOfBirth", "*"): "Date of birth must be a valid date",
    ("password", "string_too_short"): "Password must be at least 6 characters long",
    ("password", "string_too_long"): "Password must be less than 100 characters",
    ("skills", "too_short"): "At least one skill is required",
    ("skills.*.field", "string_too_short"): "Skill field must be at least 3 characters long",
    ("skills.*.tags", "too_short"): "At least one skill tag is required",
    ("skills.*.tags.*", "string_too_short"): "Each skill tag must be at least 3 characters long",
}


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def _lower(value: str) -> str:
    return value.lower()


def _parse_date_of_birth(value: Any) -> date:
    """Read an ISO 8601 date or datetime, taking the calendar day in UTC.

    Digit-only strings are refused rather than read as compact dates or
    epoch seconds.
    """
    if not isinstance(value, str) or not value.strip() or value.strip().isdigit():
        raise ValueError("Date of birth must be a valid date")
    parsed = datetime.fromisoformat(value.strip())
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC)
    return parsed.date()


Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=100)]
PhoneExtension = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
PhoneNumber = Annotated[str, StringConstraints(strip_whitespace=True, min_length=5)]
Email = Annotated[EmailStr, BeforeValidator(_strip), AfterValidator(_lower)]
DateOfBirth = Annotated[date, BeforeValidator(_parse_date_of_birth)]
Password = Annotated[str, StringConstraints(min_length=6, max_length=100)]
SkillField = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3)]
SkillTag = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3)]


class _Schema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=False,
        validate_by_alias=True,
        serialize_by_alias=True,
        extra="ignore",
    )


class SkillInput(_Schema):
    field: SkillField
    tags: Annotated[list[SkillTag], Field(min_length=1)]


class UserCreate(_Schema):
    """Payload accepted when registering a user. Every field is required."""

    name: Name
    ext: PhoneExtension
    phone: PhoneNumber
    email: Email
    date_of_birth: DateOfBirth
    password: Password
    skills: Annotated[list[SkillInput], Field(min_length=1)]


class UserUpdate(_Schema):
    """Partial user payload. Every field is optional and the id is not accepted.

    Explicit nulls are rejected; an absent field is simply left unchanged.
    """

    name: Name = None  # type: ignore[assignment]
    ext: PhoneExtension = None  # type: ignore[assignment]
    phone: PhoneNumber = None  # type: ignore[assignment]
    email: Email = None  # type: ignore[assignment]
    date_of_birth: DateOfBirth = None  # type: ignore[assignment]
    password: Password = None  # type: ignore[assignment]
    skills: Annotated[list[SkillInput], Field(min_length=1)] = None  # type: ignore[assignment]

    def changes(self) -> dict[str, Any]:
        """Provided fields only, keyed by attribute name."""
        return self.model_dump(by_alias=False, exclude_unset=True)


def is_json_object(candidate: Any) -> bool:
    """True when ``candidate`` is a JSON object (not null, not an array)."""
    return isinstance(candidate, dict)


def _validate(schema: type[_Schema], candidate: Any) -> ValidationResult[Any]:
    try:
        data = schema.model_validate(candidate)
    except ValidationError as exc:
        issues = issues_from_errors(
            exc.errors(include_url=False), candidate, USER_MESSAGES
        )
        return ValidationFailure(issues=issues)
    return ValidationSuccess(data=data)


def validate_create(candidate: Any) -> ValidationResult[UserCreate]:
    """Validate a create payload where every field is required."""
    return _validate(UserCreate, candidate)


def validate_update(candidate: Any) -> ValidationResult[UserUpdate]:
    """Validate a partial update payload."""
    return _validate(UserUpdate, candidate)
