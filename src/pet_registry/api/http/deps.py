"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Request
from sqlmodel import Session

from src.pet_registry.api.http.app_data import ApplicationDependencies


def get_db_service(request: Request):
    """Get the database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_session(request: Request) -> Iterator[Session]:
    """Yield a database session that is closed after the request."""
    session = get_db_service(request).get_session()
    try:
        yield session
    finally:
        session.close()
