"""Unit tests for the user entity package.

Tests the hybrid entity structure where domain model, database model,
and repository are colocated in the same package.
"""

from datetime import UTC, date, datetime
from uuid import UUID

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from user_registry.entities.user import Skill, User, UserRepository, UserTable


def _user(**overrides) -> User:
    fields = {
        "name": "Ada Lovelace",
        "ext": "+44",
        "phone": "5551234",
        "email": "ada@example.com",
        "date_of_birth": date(1990, 5, 15),
        "skills": [Skill(field="Mathematics", tags=["analysis", "engines"])],
    }
    fields.update(overrides)
    return User(**fields)


class TestUser:
    """Test the User domain entity."""

    def test_user_creation_with_defaults(self):
        """User should be created with auto-generated UUID."""
        user = _user()

        assert isinstance(user.id, str)
        UUID(user.id)  # Raises ValueError if invalid
        assert user.created_at is not None
        assert user.updated_at is not None

    def test_serializes_in_camel_case(self):
        dumped = _user().model_dump(mode="json")

        assert dumped["dateOfBirth"] == "1990-05-15"
        assert "createdAt" in dumped
        assert "updatedAt" in dumped
        assert dumped["skills"] == [
            {"field": "Mathematics", "tags": ["analysis", "engines"]}
        ]
        assert "password" not in dumped
        assert "passwordHash" not in dumped

    def test_equality_ignores_timestamps(self):
        user = _user()
        later = user.model_copy(update={"updated_at": datetime(2030, 1, 1, tzinfo=UTC)})

        assert user == later
        assert hash(user) == hash(later)

    def test_equality_compares_business_fields(self):
        user = _user()

        assert user != user.model_copy(update={"phone": "5550000"})
        assert user != "not a user"


class TestUserRepository:
    """Test the UserRepository data access."""

    @pytest.fixture
    def repo(self, session: Session) -> UserRepository:
        return UserRepository(session)

    def test_create_and_get(self, repo: UserRepository, session: Session):
        user = _user()

        created = repo.create(user, password_hash="hashed")
        session.commit()

        assert created == user
        assert repo.get(user.id) == user
        assert session.get(UserTable, user.id).password_hash == "hashed"

    def test_get_unknown_id(self, repo: UserRepository):
        assert repo.get("missing") is None

    def test_get_by_email(self, repo: UserRepository):
        user = repo.create(_user(), password_hash="hashed")

        assert repo.get_by_email("ada@example.com") == user
        assert repo.get_by_email("grace@example.com") is None

    def test_duplicate_email_violates_unique_index(
        self, repo: UserRepository, session: Session
    ):
        repo.create(_user(), password_hash="hashed")
        session.commit()

        with pytest.raises(IntegrityError):
            repo.create(_user(name="Impostor"), password_hash="hashed")
        session.rollback()

        assert repo.count() == 1

    def test_find_email_conflict_skips_the_owner(self, repo: UserRepository):
        ada = repo.create(_user(), password_hash="hashed")
        grace = repo.create(_user(email="grace@example.com"), password_hash="hashed")

        assert repo.find_email_conflict("ada@example.com", exclude_id=ada.id) is None
        assert repo.find_email_conflict("ada@example.com", exclude_id=grace.id) == ada

    def test_list_page_orders_newest_first(self, repo: UserRepository):
        users = [
            repo.create(_user(email=f"user{i}@example.com"), password_hash="hashed")
            for i in range(4)
        ]

        first = repo.list_page(offset=0, limit=3)
        rest = repo.list_page(offset=3, limit=3)

        assert first == [users[3], users[2], users[1]]
        assert rest == [users[0]]
        assert repo.count() == 4

    def test_update_applies_changes_and_touches_timestamp(self, repo: UserRepository):
        created = repo.create(_user(), password_hash="hashed")

        updated = repo.update(
            created.id, {"name": "Ada King", "skills": [{"field": "Poetry", "tags": ["odes"]}]}
        )

        assert updated is not None
        assert updated.name == "Ada King"
        assert updated.skills == [Skill(field="Poetry", tags=["odes"])]
        assert updated.updated_at >= created.updated_at

    def test_update_unknown_id(self, repo: UserRepository):
        assert repo.update("missing", {"name": "Nobody"}) is None

    def test_delete(self, repo: UserRepository):
        created = repo.create(_user(), password_hash="hashed")

        assert repo.delete(created.id) == created
        assert repo.get(created.id) is None
        assert repo.delete(created.id) is None
