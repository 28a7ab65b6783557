"""Core services exports."""

from .book_service import BookService, DefaultBookService
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

__all__ = [
    # Book Services
    "BookService",
    "DefaultBookService",
    # Database Services
    "DbManageService",
    "DbSessionService",
]
