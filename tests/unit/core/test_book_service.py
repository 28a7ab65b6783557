"""Unit tests for the book service using a repository double."""

from unittest.mock import Mock

import pytest
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from books_api.core.errors import BookServiceError, ErrorKind
from books_api.core.services.book_service import (
    DefaultBookService,
    merge_book,
    parse_color,
)
from books_api.entities.book import Book, BookCreate, BookUpdate, Color


@pytest.fixture
def service(mock_book_repository: Mock) -> DefaultBookService:
    return DefaultBookService(mock_book_repository)


class TestParseColor:
    def test_absent(self):
        assert parse_color(None) is None

    def test_valid(self):
        assert parse_color("Green") is Color.GREEN

    def test_invalid_names_value(self):
        with pytest.raises(BookServiceError) as exc_info:
            parse_color("Purple")

        assert exc_info.value.kind is ErrorKind.INVALID_INPUT
        assert exc_info.value.message == "invalid color: Purple"


class TestMergeBook:
    """Partial update rules."""

    def test_only_title_changes(self, dune: Book):
        merged = merge_book(dune, BookUpdate(title="X"), None)

        assert merged == dune.model_copy(update={"title": "X"})

    def test_zero_pages_is_absent(self, dune: Book):
        merged = merge_book(dune, BookUpdate(pages=0), None)
        assert merged.pages == 412

    def test_empty_strings_are_absent(self, dune: Book):
        merged = merge_book(dune, BookUpdate(author="", title=""), None)
        assert (merged.author, merged.title) == ("Herbert", "Dune")

    def test_null_color_keeps_existing(self, dune: Book):
        assert merge_book(dune, BookUpdate(), None).color is Color.RED

    def test_all_fields(self, dune: Book):
        patch = BookUpdate(author="F. Herbert", title="Dune Messiah", pages=256)

        merged = merge_book(dune, patch, Color.BLUE)

        assert merged == Book(
            id=1, author="F. Herbert", title="Dune Messiah", pages=256, color=Color.BLUE
        )

    def test_does_not_mutate_existing(self, dune: Book):
        merge_book(dune, BookUpdate(title="X"), Color.GREEN)
        assert dune.title == "Dune"
        assert dune.color is Color.RED


class TestCreateBook:
    def test_success(self, service, mock_book_repository):
        payload = BookCreate(title="Dune", author="Herbert", pages=412, color="Red")

        book = service.create_book(payload)

        assert book == Book(id=1, author="Herbert", title="Dune", pages=412, color=Color.RED)
        stored = mock_book_repository.create.call_args[0][0]
        assert stored.id is None
        assert stored.color is Color.RED

    def test_without_color(self, service):
        book = service.create_book(BookCreate(title="Plain"))
        assert book.color is None

    def test_invalid_color(self, service, mock_book_repository):
        with pytest.raises(BookServiceError) as exc_info:
            service.create_book(BookCreate(title="Dune", color="Purple"))

        assert exc_info.value.kind is ErrorKind.INVALID_INPUT
        assert "Purple" in exc_info.value.message
        mock_book_repository.create.assert_not_called()

    def test_store_failure(self, service, mock_book_repository):
        mock_book_repository.create.side_effect = OperationalError(
            "INSERT", {}, Exception("disk I/O error")
        )

        with pytest.raises(BookServiceError) as exc_info:
            service.create_book(BookCreate(title="Dune"))

        assert exc_info.value.kind is ErrorKind.STORE_FAILURE
        assert exc_info.value.message.startswith("failed to create book:")


class TestGetBook:
    def test_success(self, service, mock_book_repository, dune):
        mock_book_repository.get.return_value = dune

        assert service.get_book(1) == dune
        mock_book_repository.get.assert_called_once_with(1)

    def test_not_found(self, service, mock_book_repository):
        mock_book_repository.get.return_value = None

        with pytest.raises(BookServiceError) as exc_info:
            service.get_book(999)

        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        assert exc_info.value.message == "book not found"

    def test_store_failure_is_not_reported_as_missing(self, service, mock_book_repository):
        mock_book_repository.get.side_effect = SQLAlchemyError("connection lost")

        with pytest.raises(BookServiceError) as exc_info:
            service.get_book(1)

        assert exc_info.value.kind is ErrorKind.STORE_FAILURE


class TestListBooks:
    def test_empty(self, service, mock_book_repository):
        mock_book_repository.list_all.return_value = []
        assert service.list_books() == []

    def test_returns_repository_books(self, service, mock_book_repository, dune):
        mock_book_repository.list_all.return_value = [dune]
        assert service.list_books() == [dune]

    def test_store_failure(self, service, mock_book_repository):
        mock_book_repository.list_all.side_effect = SQLAlchemyError("no such table")

        with pytest.raises(BookServiceError) as exc_info:
            service.list_books()

        assert exc_info.value.kind is ErrorKind.STORE_FAILURE
        assert exc_info.value.message.startswith("failed to retrieve books:")


class TestUpdateBook:
    def test_partial_update(self, service, mock_book_repository, dune):
        mock_book_repository.get.return_value = dune

        updated = service.update_book(1, BookUpdate(pages=500))

        assert updated.pages == 500
        assert (updated.title, updated.author, updated.color) == ("Dune", "Herbert", Color.RED)
        mock_book_repository.update.assert_called_once_with(updated)

    def test_same_color_still_written(self, service, mock_book_repository, dune):
        mock_book_repository.get.return_value = dune

        service.update_book(1, BookUpdate(color="Red"))

        assert mock_book_repository.update.call_args[0][0].color is Color.RED

    def test_not_found(self, service, mock_book_repository):
        mock_book_repository.get.return_value = None

        with pytest.raises(BookServiceError) as exc_info:
            service.update_book(999, BookUpdate(title="X"))

        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        mock_book_repository.update.assert_not_called()

    def test_invalid_color_does_not_mutate(self, service, mock_book_repository, dune):
        mock_book_repository.get.return_value = dune

        with pytest.raises(BookServiceError) as exc_info:
            service.update_book(1, BookUpdate(title="X", color="Purple"))

        assert exc_info.value.kind is ErrorKind.INVALID_INPUT
        mock_book_repository.update.assert_not_called()
        assert dune.title == "Dune"

    def test_store_failure(self, service, mock_book_repository, dune):
        mock_book_repository.get.return_value = dune
        mock_book_repository.update.side_effect = SQLAlchemyError("locked")

        with pytest.raises(BookServiceError) as exc_info:
            service.update_book(1, BookUpdate(title="X"))

        assert exc_info.value.kind is ErrorKind.STORE_FAILURE


class TestDeleteBook:
    def test_success(self, service, mock_book_repository, dune):
        mock_book_repository.get.return_value = dune
        mock_book_repository.delete.return_value = True

        service.delete_book(1)

        mock_book_repository.delete.assert_called_once_with(1)

    def test_not_found(self, service, mock_book_repository):
        mock_book_repository.get.return_value = None

        with pytest.raises(BookServiceError) as exc_info:
            service.delete_book(1)

        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        mock_book_repository.delete.assert_not_called()

    def test_store_failure(self, service, mock_book_repository, dune):
        mock_book_repository.get.return_value = dune
        mock_book_repository.delete.side_effect = SQLAlchemyError("locked")

        with pytest.raises(BookServiceError) as exc_info:
            service.delete_book(1)

        assert exc_info.value.kind is ErrorKind.STORE_FAILURE
