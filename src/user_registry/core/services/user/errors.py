"""Errors raised by the user service."""

from user_registry.core.validation import FieldError


class UserServiceError(Exception):
    """Base class for user service failures carrying a client-facing payload."""

    def __init__(self, message: str, errors: list[FieldError] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class UserRequestError(UserServiceError):
    """The request cannot be honoured: bad input, duplicate email, unknown id."""


class UserNotFoundError(UserRequestError):
    def __init__(self, user_id: str):
        super().__init__(f"User with id {user_id} not found")
        self.user_id = user_id


class UserPersistenceError(UserServiceError):
    """The store failed while writing. Details are logged, never returned."""
