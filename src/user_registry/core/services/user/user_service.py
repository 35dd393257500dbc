from dataclasses import dataclass
from typing import Any

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session

from user_registry.core.security import hash_password
from user_registry.core.services.user.errors import (
    UserNotFoundError,
    UserPersistenceError,
    UserRequestError,
)
from user_registry.core.validation import (
    FieldError,
    ValidationFailure,
    is_json_object,
    validate_create,
    validate_update,
)
from user_registry.entities.user import User, UserRepository
from user_registry.runtime.config.config_data import PaginationConfig
from user_registry.runtime.context import get_config


@dataclass(frozen=True)
class UserPage:
    """One page of users plus the numbers a client needs to navigate."""

    data: list[User]
    total_users: int
    total_pages: int
    current_page: int
    limit: int
    has_next: bool
    has_prev: bool


def _duplicate_email_error(email: str) -> UserRequestError:
    return UserRequestError(
        "User already exists",
        [
            FieldError(
                field="email",
                message="User with this email already exists",
                received_value=email,
            )
        ],
    )


class UserService:
    """Create, list, fetch, update and delete users.

    Each call is one unit of work on the injected session: the existence or
    uniqueness check and the write that follows it are committed together.
    """

    def __init__(
        self, db_session: Session, pagination: PaginationConfig | None = None
    ):
        self._db_session = db_session
        self._user_repo = UserRepository(db_session)
        self._pagination = pagination or get_config().pagination

    def create_user(self, payload: Any) -> User:
        if not is_json_object(payload):
            raise UserRequestError(
                "Invalid request body",
                [
                    FieldError(
                        field="body",
                        message="Request body must be a valid JSON object",
                    )
                ],
            )

        result = validate_create(payload)
        if isinstance(result, ValidationFailure):
            raise UserRequestError("Validation failed", result.field_errors())
        data = result.data

        if self._user_repo.get_by_email(data.email) is not None:
            logger.info("Rejected user creation: email already registered")
            raise _duplicate_email_error(data.email)

        user = User(
            name=data.name,
            ext=data.ext,
            phone=data.phone,
            email=data.email,
            date_of_birth=data.date_of_birth,
            skills=[skill.model_dump(by_alias=False) for skill in data.skills],
        )

        try:
            created = self._user_repo.create(user, hash_password(data.password))
            self._db_session.commit()
        except IntegrityError as e:
            # Lost the race against a concurrent insert of the same email
            self._db_session.rollback()
            logger.warning("Unique constraint rejected user creation: {}", e.orig)
            raise _duplicate_email_error(data.email) from e
        except SQLAlchemyError as e:
            self._db_session.rollback()
            logger.exception("Failed to persist new user")
            raise UserPersistenceError(
                "Failed to create user",
                [
                    FieldError(
                        field="server",
                        message="Internal server error occurred while creating user",
                    )
                ],
            ) from e

        logger.info("Created user {}", created.id)
        return created

    def list_users(self, page: int | None = None, limit: int | None = None) -> UserPage:
        """Return one page of users, newest first.

        Missing or non-positive ``page``/``limit`` fall back to the configured
        defaults, and the page is clamped into the available range.
        """
        requested_page = page if page and page > 0 else self._pagination.default_page
        limit = limit if limit and limit > 0 else self._pagination.default_limit

        total_users = self._user_repo.count()
        total_pages = -(-total_users // limit)
        current_page = max(1, min(requested_page, total_pages))
        offset = (current_page - 1) * limit

        # Never more rows than exist; keeps huge limits within the store's int range
        data = self._user_repo.list_page(
            offset=offset, limit=min(limit, max(total_users, 1))
        )

        return UserPage(
            data=data,
            total_users=total_users,
            total_pages=total_pages,
            current_page=current_page,
            limit=limit,
            has_next=current_page < total_pages,
            has_prev=current_page > 1,
        )

    def get_user(self, user_id: str) -> User | None:
        return self._user_repo.get(user_id)

    def delete_user(self, user_id: str) -> User:
        if self._user_repo.get(user_id) is None:
            raise UserNotFoundError(user_id)

        deleted = self._user_repo.delete(user_id)
        self._db_session.commit()
        logger.info("Deleted user {}", user_id)
        return deleted

    def update_user(self, user_id: str, payload: Any) -> User:
        if not is_json_object(payload):
            raise UserRequestError("Invalid input: Expected an object")

        result = validate_update(payload)
        if isinstance(result, ValidationFailure):
            raise UserRequestError(
                f"Validation failed: {result.summary()}", result.field_errors()
            )
        changes = result.data.changes()

        if self._user_repo.get(user_id) is None:
            raise UserNotFoundError(user_id)

        email = changes.get("email")
        if email and self._user_repo.find_email_conflict(email, exclude_id=user_id):
            raise UserRequestError(
                "Email already exists",
                [
                    FieldError(
                        field="email",
                        message="User with this email already exists",
                        received_value=email,
                    )
                ],
            )

        if "password" in changes:
            changes["password_hash"] = hash_password(changes.pop("password"))

        try:
            updated = self._user_repo.update(user_id, changes)
            self._db_session.commit()
        except IntegrityError as e:
            self._db_session.rollback()
            raise UserRequestError("Email already exists") from e

        logger.info("Updated user {} fields {}", user_id, sorted(changes))
        return updated
