"""Book API router with CRUD operations."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from books_api.api.http.deps import get_book_service
from books_api.core.services import BookService
from books_api.entities.book import Book, BookCreate, BookUpdate

# Path ids are unsigned 32-bit integers
MAX_BOOK_ID = 2**32 - 1

BookId = Annotated[int, Path(ge=0, le=MAX_BOOK_ID, description="Book ID")]

router = APIRouter(prefix="/books", tags=["books"])


@router.post(
    "",
    response_model=Book,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_book(
    payload: BookCreate,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Create a new book."""
    return service.create_book(payload)


@router.get("", response_model=list[Book], response_model_exclude_none=True)
def list_books(service: BookService = Depends(get_book_service)) -> list[Book]:
    """List all books."""
    return service.list_books()


@router.get("/{book_id}", response_model=Book, response_model_exclude_none=True)
def get_book(
    book_id: BookId,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Get a book by ID."""
    return service.get_book(book_id)


@router.put("/{book_id}", response_model=Book, response_model_exclude_none=True)
def update_book(
    book_id: BookId,
    patch: BookUpdate,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Update the fields present in the payload."""
    return service.update_book(book_id, patch)


@router.delete("/{book_id}")
def delete_book(
    book_id: BookId,
    service: BookService = Depends(get_book_service),
) -> dict[str, str]:
    """Delete a book."""
    service.delete_book(book_id)
    return {"message": "book deleted successfully"}
