"""User database table model."""

from datetime import date
from typing import Any

from sqlalchemy import JSON, Column
from sqlmodel import Field

from user_registry.entities._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users.

    This represents how the User entity is stored in the database.
    Skills are kept as a JSON array of ``{"field", "tags"}`` objects.
    """

    name: str
    ext: str
    phone: str
    email: str = Field(index=True, unique=True)
    date_of_birth: date
    password_hash: str
    skills: list[dict[str, Any]] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
