"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from books_api.api.http.app_data import ApplicationDependencies
from books_api.core.services import BookService, DbSessionService, DefaultBookService
from books_api.entities.book import BookRepository, SQLModelBookRepository


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service created at startup."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a request-scoped database session."""
    with database_service.session_scope() as session:
        yield session


def get_book_repository(db: Session = Depends(get_db_session)) -> BookRepository:
    return SQLModelBookRepository(db)


def get_book_service(
    repository: BookRepository = Depends(get_book_repository),
) -> BookService:
    return DefaultBookService(repository)
