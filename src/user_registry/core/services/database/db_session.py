"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, create_engine

from user_registry.runtime.config.config_data import ConfigData
from user_registry.runtime.context import get_config


def build_engine(main_config: ConfigData) -> Engine:
    """Create the SQLAlchemy engine described by the database configuration."""
    db_config = main_config.database

    engine_kwargs: dict[str, Any] = {
        "pool_pre_ping": True,  # Validate connections before use
        "echo": db_config.echo,
        "connect_args": _get_connect_args(main_config),
    }

    # SQLite (especially in-memory) pools do not take sizing arguments
    if not db_config.is_sqlite:
        engine_kwargs.update(
            {
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
                "pool_recycle": db_config.pool_recycle,
                "pool_reset_on_return": "rollback",
            }
        )

    logger.info(
        "Initializing database engine for {}",
        make_url(db_config.url).render_as_string(hide_password=True),
    )
    return create_engine(db_config.connection_string, **engine_kwargs)


def _get_connect_args(config: ConfigData) -> dict:
    """Get database-specific connection arguments."""
    connect_args: dict[str, Any] = {}

    if config.database.url.startswith("postgresql"):
        connect_args.update(
            {
                "application_name": f"{config.app.environment}_user_registry",
                "connect_timeout": 30,
            }
        )

    elif config.database.is_sqlite:
        connect_args.update(
            {
                "check_same_thread": False,  # Sessions cross FastAPI's threadpool
                "timeout": 20,  # Lock timeout
            }
        )

        if config.app.environment == "production":
            logger.warning(
                "SQLite is not recommended for production use. "
                "Consider PostgreSQL for better performance and reliability."
            )

    return connect_args


class DbSessionService:
    def __init__(self, engine: Engine | None = None):
        """Initialize the shared database engine and session factory."""
        logger.info("Setting up database engine and session factory")
        self._engine = engine if engine is not None else build_engine(get_config())

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,  # Entities are built after commit
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Transactional scope: commit on success, roll back on error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.bind(error_type=type(e).__name__).error(
                "Database transaction failed: {}", e
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except SQLAlchemyError as e:
            logger.bind(error_type=type(e).__name__).error(
                "Database health check failed: {}", e
            )
            return False

    def get_pool_status(self) -> dict:
        """Get current connection pool status for monitoring."""
        pool = self._engine.pool
        return {
            "size": getattr(pool, "size", lambda: 0)(),
            "checked_in": getattr(pool, "checkedin", lambda: 0)(),
            "checked_out": getattr(pool, "checkedout", lambda: 0)(),
            "overflow": getattr(pool, "overflow", lambda: 0)(),
        }

    def dispose(self) -> None:
        self._engine.dispose()
