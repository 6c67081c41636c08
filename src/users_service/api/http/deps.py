"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.users_service.api.http.app_data import ApplicationDependencies
from src.users_service.core.services import DbSessionService, UserService
from src.users_service.entities.user import UserRepository, UserStore


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a session for the duration of one request."""
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_user_repository(db: Session = Depends(get_db_session)) -> UserStore:
    return UserRepository(db)


def get_user_service(store: UserStore = Depends(get_user_repository)) -> UserService:
    return UserService(store)
