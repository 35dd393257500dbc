"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from user_registry.api.http.app_data import ApplicationDependencies
from user_registry.core.services import UserService
from user_registry.runtime.context import get_config


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a database session for the duration of one request."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    with app_deps.database_service.get_session() as session:
        yield session


def get_user_service(db: Session = Depends(get_db_session)) -> UserService:
    """Get a User service bound to the request's session."""
    return UserService(db, pagination=get_config().pagination)
