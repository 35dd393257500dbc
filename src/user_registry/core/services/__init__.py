"""Core services exports."""

# Database Services
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

# User Services
from .user.errors import (
    UserNotFoundError,
    UserPersistenceError,
    UserRequestError,
    UserServiceError,
)
from .user.user_service import UserPage, UserService

__all__ = [
    # Database Services
    "DbManageService",
    "DbSessionService",
    # User Services
    "UserNotFoundError",
    "UserPage",
    "UserPersistenceError",
    "UserRequestError",
    "UserService",
    "UserServiceError",
]
