"""Book entity module.

This module contains all Book-related classes organized by responsibility:
- Book, BookCreate, BookUpdate, Color: Domain entity and inbound payloads
- BookTable: Database persistence model
- BookRepository: Data access interface and its SQLModel implementation
"""

from .entity import Book, BookCreate, BookUpdate, Color
from .repository import BookRepository, SQLModelBookRepository
from .table import BookTable

__all__ = [
    "Book",
    "BookCreate",
    "BookUpdate",
    "Color",
    "BookTable",
    "BookRepository",
    "SQLModelBookRepository",
]
