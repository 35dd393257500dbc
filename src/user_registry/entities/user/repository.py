"""User repository: data access for the user table."""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import func
from sqlmodel import Session, col, select

from user_registry.entities.user.entity import User
from user_registry.entities.user.table import UserTable


class UserRepository:
    """Data-access layer for users.

    The repository only flushes; committing is left to the caller so that a
    check and the write that depends on it share one transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def count(self) -> int:
        statement = select(func.count()).select_from(UserTable)
        return self._session.exec(statement).one()

    def list_page(self, offset: int, limit: int) -> list[User]:
        """Return at most ``limit`` users, newest first, skipping ``offset``."""
        statement = (
            select(UserTable)
            .order_by(col(UserTable.created_at).desc())
            .offset(offset)
            .limit(limit)
        )
        rows = self._session.exec(statement).all()
        return [User.model_validate(row, from_attributes=True) for row in rows]

    def get(self, user_id: str) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def get_by_email(self, email: str) -> User | None:
        statement = select(UserTable).where(UserTable.email == email)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def find_email_conflict(self, email: str, exclude_id: str) -> User | None:
        """Return another user holding ``email``, ignoring ``exclude_id``."""
        statement = select(UserTable).where(
            (UserTable.email == email) & (UserTable.id != exclude_id)
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def create(self, user: User, password_hash: str) -> User:
        row = UserTable(
            **user.model_dump(by_alias=False),
            password_hash=password_hash,
        )
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return User.model_validate(row, from_attributes=True)

    def update(self, user_id: str, changes: dict[str, Any]) -> User | None:
        """Apply ``changes`` (snake_case column names) to an existing row."""
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None

        for key, value in changes.items():
            setattr(row, key, value)
        row.updated_at = datetime.now(UTC)

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return User.model_validate(row, from_attributes=True)

    def delete(self, user_id: str) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None

        deleted = User.model_validate(row, from_attributes=True)
        self._session.delete(row)
        self._session.flush()
        return deleted
