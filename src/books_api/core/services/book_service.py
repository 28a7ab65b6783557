"""Business logic for book records.

The service validates colors, applies partial-update merge rules and is the
only place that classifies failures into :class:`ErrorKind` values.
"""

from abc import ABC, abstractmethod

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from books_api.core.errors import BookServiceError
from books_api.entities.book import Book, BookCreate, BookRepository, BookUpdate, Color


class BookService(ABC):
    """Abstract interface for book business operations."""

    @abstractmethod
    def create_book(self, payload: BookCreate) -> Book:
        """Validate and persist a new book; returns it with its id."""
        raise NotImplementedError

    @abstractmethod
    def get_book(self, book_id: int) -> Book:
        """Return one book or raise a NOT_FOUND error."""
        raise NotImplementedError

    @abstractmethod
    def list_books(self) -> list[Book]:
        """Return all books (possibly none)."""
        raise NotImplementedError

    @abstractmethod
    def update_book(self, book_id: int, patch: BookUpdate) -> Book:
        """Merge ``patch`` onto the stored book and return the result."""
        raise NotImplementedError

    @abstractmethod
    def delete_book(self, book_id: int) -> None:
        """Delete an existing book or raise a NOT_FOUND error."""
        raise NotImplementedError


def parse_color(value: str | None) -> Color | None:
    """Convert a raw color string, rejecting unknown values."""
    if value is None:
        return None
    if not Color.is_valid(value):
        raise BookServiceError.invalid_color(value)
    return Color(value)


def merge_book(existing: Book, patch: BookUpdate, color: Color | None) -> Book:
    """Apply the present fields of ``patch`` onto ``existing``.

    A field counts as present when it is a non-empty string, a non-zero page
    count or a non-null color. Zero values can therefore never clear a field.
    """
    changes: dict[str, object] = {}
    if patch.author != "":
        changes["author"] = patch.author
    if patch.title != "":
        changes["title"] = patch.title
    if patch.pages != 0:
        changes["pages"] = patch.pages
    if color is not None:
        changes["color"] = color
    return existing.model_copy(update=changes)


class DefaultBookService(BookService):
    def __init__(self, repository: BookRepository) -> None:
        self._repository = repository

    def _fetch(self, book_id: int, purpose: str) -> Book:
        try:
            book = self._repository.get(book_id)
        except SQLAlchemyError as e:
            logger.error("Failed to retrieve book with ID {} {}: {}", book_id, purpose, e)
            raise BookServiceError.store_failure("retrieve book", e) from e
        if book is None:
            logger.warning("Book with ID {} not found {}", book_id, purpose)
            raise BookServiceError.not_found()
        return book

    def create_book(self, payload: BookCreate) -> Book:
        logger.info("Creating new book: {} by {}", payload.title, payload.author)

        try:
            color = parse_color(payload.color)
        except BookServiceError:
            logger.warning("Invalid color provided for book: {}", payload.color)
            raise

        book = Book(
            author=payload.author,
            title=payload.title,
            pages=payload.pages,
            color=color,
        )
        try:
            created = self._repository.create(book)
        except SQLAlchemyError as e:
            logger.error("Failed to create book: {}", e)
            raise BookServiceError.store_failure("create book", e) from e

        logger.info("Successfully created book with ID: {}", created.id)
        return created

    def get_book(self, book_id: int) -> Book:
        logger.info("Retrieving book with ID: {}", book_id)
        book = self._fetch(book_id, "for retrieval")
        logger.info("Successfully retrieved book: {}", book.title)
        return book

    def list_books(self) -> list[Book]:
        logger.info("Retrieving all books")
        try:
            books = self._repository.list_all()
        except SQLAlchemyError as e:
            logger.error("Failed to retrieve books: {}", e)
            raise BookServiceError.store_failure("retrieve books", e) from e

        logger.info("Successfully retrieved {} books", len(books))
        return books

    def update_book(self, book_id: int, patch: BookUpdate) -> Book:
        logger.info("Updating book with ID: {}", book_id)
        existing = self._fetch(book_id, "for update")

        try:
            color = parse_color(patch.color)
        except BookServiceError:
            logger.warning("Invalid color provided for book update: {}", patch.color)
            raise

        merged = merge_book(existing, patch, color)
        try:
            updated = self._repository.update(merged)
        except SQLAlchemyError as e:
            logger.error("Failed to update book with ID {}: {}", book_id, e)
            raise BookServiceError.store_failure("update book", e) from e

        logger.info("Successfully updated book: {}", updated.title)
        return updated

    def delete_book(self, book_id: int) -> None:
        logger.info("Deleting book with ID: {}", book_id)
        self._fetch(book_id, "for deletion")

        try:
            self._repository.delete(book_id)
        except SQLAlchemyError as e:
            logger.error("Failed to delete book with ID {}: {}", book_id, e)
            raise BookServiceError.store_failure("delete book", e) from e

        logger.info("Successfully deleted book with ID: {}", book_id)
