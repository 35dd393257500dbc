"""Schema management for the application database."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from user_registry.core.services.database.db_session import build_engine
from user_registry.runtime.context import get_config


class DbManageService:
    def __init__(self, engine: Engine | None = None):
        self._engine = engine if engine is not None else build_engine(get_config())

    def create_all(self) -> None:
        """Create all database tables that do not exist yet."""
        from user_registry.entities.user import UserTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        """Drop every table known to the metadata."""
        from user_registry.entities.user import UserTable  # noqa: F401

        SQLModel.metadata.drop_all(self._engine)
        logger.warning("Dropped all database tables.")
