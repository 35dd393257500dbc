"""User payload validation."""

from .issues import (
    FieldError,
    ValidationFailure,
    ValidationIssue,
    ValidationResult,
    ValidationSuccess,
)
from .user_schema import (
    SkillInput,
    UserCreate,
    UserUpdate,
    is_json_object,
    validate_create,
    validate_update,
)

__all__ = [
    "FieldError",
    "SkillInput",
    "UserCreate",
    "UserUpdate",
    "ValidationFailure",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSuccess",
    "is_json_object",
    "validate_create",
    "validate_update",
]
