"""Translate service, decoding and routing failures into JSON error responses."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from books_api.core.errors import BookServiceError, ErrorKind

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.MALFORMED_REQUEST: 400,
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORE_FAILURE: 500,
}

INVALID_BOOK_ID = "invalid book ID"


def error_response(kind: ErrorKind, message: str) -> JSONResponse:
    return JSONResponse(status_code=STATUS_BY_KIND[kind], content={"error": message})


def describe_validation_error(exc: RequestValidationError) -> str:
    """Build a single client-facing message from request validation errors."""
    errors = exc.errors()
    if any(error.get("loc", ("",))[0] == "path" for error in errors):
        return INVALID_BOOK_ID

    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "malformed request body"


async def book_service_error_handler(
    request: Request, exc: BookServiceError
) -> JSONResponse:
    logger.bind(error_kind=exc.kind.value).warning(
        "{} {} failed: {}", request.method, request.url.path, exc.message
    )
    return error_response(exc.kind, exc.message)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = describe_validation_error(exc)
    logger.warning("Malformed request to {}: {}", request.url.path, message)
    return error_response(ErrorKind.MALFORMED_REQUEST, message)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Routing failures (unknown path, wrong method) in the same error shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=exc.headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookServiceError, book_service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
