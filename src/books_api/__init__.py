"""Books API: a layered CRUD service for book records."""

__version__ = "0.1.0"
