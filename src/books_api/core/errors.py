"""Domain error taxonomy shared by the service and HTTP layers."""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds the service reports."""

    MALFORMED_REQUEST = "malformed_request"
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    STORE_FAILURE = "store_failure"


class BookServiceError(Exception):
    """Failure raised by the book service, tagged with its kind."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"BookServiceError(kind={self.kind.value!r}, message={self.message!r})"

    @classmethod
    def not_found(cls) -> "BookServiceError":
        return cls(ErrorKind.NOT_FOUND, "book not found")

    @classmethod
    def invalid_color(cls, value: str) -> "BookServiceError":
        return cls(ErrorKind.INVALID_INPUT, f"invalid color: {value}")

    @classmethod
    def store_failure(cls, action: str, cause: Exception) -> "BookServiceError":
        return cls(ErrorKind.STORE_FAILURE, f"failed to {action}: {cause}")
