"""Book domain entity."""

from enum import Enum

from pydantic import BaseModel, Field

# Signed 64-bit, the range of an INTEGER column
MIN_PAGES = -(2**63)
MAX_PAGES = 2**63 - 1


class Color(str, Enum):
    """Recognized book colors."""

    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return value in {color.value for color in cls}


class Book(BaseModel):
    """Book entity as stored and returned by the API.

    ``id`` is assigned by the store on creation and never changes afterwards.
    ``color`` is ``None`` when the book has no color.
    """

    id: int | None = Field(default=None, ge=0, description="Store-assigned identifier")
    author: str = Field(default="", description="Author name")
    title: str = Field(default="", description="Book title")
    pages: int = Field(default=0, description="Page count")
    color: Color | None = Field(default=None, description="Optional cover color")


class BookPayload(BaseModel):
    """Fields a client may send for a book.

    ``color`` stays a plain string here so an unknown value reaches the
    service and is rejected there instead of at decode time.
    """

    author: str = Field(default="", description="Author name")
    title: str = Field(default="", description="Book title")
    pages: int = Field(
        default=0,
        strict=True,
        ge=MIN_PAGES,
        le=MAX_PAGES,
        description="Page count",
    )
    color: str | None = Field(default=None, description="Red, Green or Blue")


class BookCreate(BookPayload):
    """Payload for creating a book."""


class BookUpdate(BookPayload):
    """Partial update payload.

    Empty strings, zero pages and a null color all mean "leave unchanged".
    """
