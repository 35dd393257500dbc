"""User entity module.

This module contains all User-related classes organized by responsibility:
- User, Skill: Domain entities
- UserTable: Database persistence model
- UserRepository: Data access layer
"""

from .entity import Skill, User
from .repository import UserRepository
from .table import UserTable

__all__ = ["Skill", "User", "UserTable", "UserRepository"]
