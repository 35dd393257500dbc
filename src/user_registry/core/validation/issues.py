"""Validation result types and error formatting.

Schema validation never raises to its caller. It returns either a
``ValidationSuccess`` carrying the normalized data or a
``ValidationFailure`` carrying the ordered issues, each one tied back to
the raw value the client sent.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_core import ErrorDetails

T = TypeVar("T")

ROOT_FIELD = "root"

# Marks a value the client never sent, as opposed to an explicit null
MISSING: Any = object()


class FieldError(BaseModel):
    """Wire representation of a single field-level error.

    ``receivedValue`` is serialized only when it was set, so an explicit
    null is echoed while an absent field leaves the key out.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
    )

    field: str
    message: str
    received_value: Any | None = Field(default=None)


@dataclass(frozen=True)
class ValidationIssue:
    """One schema violation found in a candidate payload."""

    path: tuple[str | int, ...]
    message: str
    received_value: Any = MISSING

    @property
    def field(self) -> str:
        dotted = ".".join(str(part) for part in self.path)
        return dotted or ROOT_FIELD

    @property
    def display_message(self) -> str:
        """Message prefixed with the field path unless it already names it."""
        field = self.field
        if field != ROOT_FIELD and field.lower() not in self.message.lower():
            return f"{field}: {self.message}"
        return self.message

    def to_field_error(self) -> FieldError:
        if self.received_value is MISSING:
            return FieldError(field=self.field, message=self.display_message)
        return FieldError(
            field=self.field,
            message=self.display_message,
            received_value=self.received_value,
        )


@dataclass(frozen=True)
class ValidationSuccess(Generic[T]):
    data: T


@dataclass(frozen=True)
class ValidationFailure:
    issues: tuple[ValidationIssue, ...]

    def field_errors(self) -> list[FieldError]:
        return [issue.to_field_error() for issue in self.issues]

    def summary(self) -> str:
        """Flat ``"path: message, path: message"`` rendering of all issues."""
        return ", ".join(
            f"{'.'.join(str(part) for part in issue.path)}: {issue.message}"
            for issue in self.issues
        )


ValidationResult = ValidationSuccess[T] | ValidationFailure


def lookup_path(
    candidate: Any, path: Sequence[str | int], default: Any = None
) -> Any:
    """Walk ``path`` into ``candidate``, returning ``default`` when it leads nowhere."""
    current = candidate
    for key in path:
        if isinstance(current, dict):
            current = current.get(key, MISSING)
        elif isinstance(current, list) and isinstance(key, int):
            current = current[key] if -len(current) <= key < len(current) else MISSING
        else:
            current = MISSING
        if current is MISSING:
            return default
    return current


def issues_from_errors(
    errors: Sequence[ErrorDetails],
    candidate: Any,
    messages: dict[tuple[str, str], str],
) -> tuple[ValidationIssue, ...]:
    """Translate pydantic error details into validation issues.

    ``messages`` maps ``(path pattern, error type)`` to a custom message,
    where list indexes in the pattern are written as ``*`` and an error type
    of ``*`` matches any type except a missing field.
    """
    issues = []
    for error in errors:
        path = tuple(error["loc"])
        pattern = ".".join("*" if isinstance(part, int) else str(part) for part in path)
        error_type = error["type"]

        message = messages.get((pattern, error_type))
        if message is None and error_type != "missing":
            message = messages.get((pattern, "*"))
        if message is None:
            message = error["msg"]

        issues.append(
            ValidationIssue(
                path=path,
                message=message,
                received_value=lookup_path(candidate, path, default=MISSING),
            )
        )
    return tuple(issues)
