"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model and request schemas
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .book import (
    Book,
    BookCreate,
    BookRepository,
    BookTable,
    BookUpdate,
    Color,
    SQLModelBookRepository,
)

__all__ = [
    "Book",
    "BookCreate",
    "BookUpdate",
    "BookTable",
    "BookRepository",
    "SQLModelBookRepository",
    "Color",
]
