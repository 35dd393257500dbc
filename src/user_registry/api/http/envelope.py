"""Uniform response envelopes returned by the HTTP API."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from user_registry.core.validation import FieldError
from user_registry.entities.user import User

DataT = TypeVar("DataT")


class _Envelope(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
    )

    success: bool
    message: str


class ApiResponse(_Envelope, Generic[DataT]):
    """``{success, message, data?, errors?}``. Members never set are omitted."""

    data: DataT | None = None
    errors: list[FieldError] | None = None

    @classmethod
    def failure(
        cls, message: str, errors: list[FieldError] | None = None
    ) -> "ApiResponse[DataT]":
        if not errors:
            return cls(success=False, message=message)
        return cls(success=False, message=message, errors=errors)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", exclude_unset=True)


class PaginatedResponse(_Envelope):
    """Listing envelope with the pagination fields flattened in."""

    data: list[User]
    total_users: int
    total_pages: int
    current_page: int
    limit: int
    has_next: bool
    has_prev: bool
