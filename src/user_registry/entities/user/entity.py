"""User domain entity."""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from user_registry.entities._base import Entity


class Skill(BaseModel):
    """One competency entry of a user."""

    model_config = ConfigDict(from_attributes=True)

    field: str = Field(description="Skill field name")
    tags: list[str] = Field(description="Ordered skill tags")


class User(Entity):
    """User entity representing a registered person.

    This is the public shape of a user record. The stored password hash
    lives on the table model only and is never part of the entity.
    """

    name: str = Field(description="User's full name")
    ext: str = Field(description="Phone country code")
    phone: str = Field(description="User's phone number")
    email: str = Field(description="User's email address, lower-cased")
    date_of_birth: date = Field(description="User's date of birth")
    skills: list[Skill] = Field(description="Ordered list of skills")

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.ext == other.ext
            and self.phone == other.phone
            and self.email == other.email
            and self.date_of_birth == other.date_of_birth
            and self.skills == other.skills
        )

    def __hash__(self) -> int:
        """Hash based on identity attributes, ignoring timestamps."""
        return hash((self.id, self.email))
