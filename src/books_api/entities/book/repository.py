"""Book data-access layer."""

from abc import ABC, abstractmethod

from sqlmodel import Session, select

from .entity import Book
from .table import BookTable


class BookRepository(ABC):
    """Abstract interface for book persistence.

    Implementations never interpret store errors; they propagate unchanged.
    """

    @abstractmethod
    def create(self, book: Book) -> Book:
        """Insert a book and return it with its store-assigned id."""
        raise NotImplementedError

    @abstractmethod
    def get(self, book_id: int) -> Book | None:
        """Return the book with ``book_id``, or None when no row matches."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Book]:
        """Return every stored book, ordered by id."""
        raise NotImplementedError

    @abstractmethod
    def update(self, book: Book) -> Book:
        """Overwrite the full row keyed by ``book.id``.

        Callers are expected to have confirmed the row exists.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, book_id: int) -> bool:
        """Remove the row if present; returns whether a row was removed."""
        raise NotImplementedError


def _to_entity(row: BookTable) -> Book:
    return Book.model_validate(row, from_attributes=True)


class SQLModelBookRepository(BookRepository):
    """Book repository backed by a SQLModel session.

    Every write commits immediately; there are no multi-call transactions.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, book: Book) -> Book:
        row = BookTable(**book.model_dump(exclude={"id"}, mode="json"))
        self._session.add(row)
        self._session.commit()
        self._session.refresh(row)
        return _to_entity(row)

    def get(self, book_id: int) -> Book | None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return None
        return _to_entity(row)

    def list_all(self) -> list[Book]:
        statement = select(BookTable).order_by(BookTable.id)
        return [_to_entity(row) for row in self._session.exec(statement).all()]

    def update(self, book: Book) -> Book:
        row = self._session.merge(BookTable(**book.model_dump(mode="json")))
        self._session.commit()
        self._session.refresh(row)
        return _to_entity(row)

    def delete(self, book_id: int) -> bool:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.commit()
        return True
