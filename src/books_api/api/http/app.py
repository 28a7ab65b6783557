"""FastAPI application factory and setup."""

import time
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from loguru import logger
from starlette.responses import JSONResponse

from books_api import __version__
from books_api.api.http.app_data import ApplicationDependencies
from books_api.api.http.errors import register_exception_handlers
from books_api.api.http.routers.book import router as book_router
from books_api.api.http.routers.health import router as health_router
from books_api.api.utils.app_startup import configure_logging
from books_api.core.services import DbManageService, DbSessionService
from books_api.runtime.config.config_data import ConfigData
from books_api.runtime.context import get_config


async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)
        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"error": "internal server error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )

        duration_ms = (time.perf_counter() - start) * 1000
        logger.bind(
            status_code=response.status_code,
            duration_ms=round(duration_ms, 1),
        ).info("request.end")
        response.headers.setdefault("X-Request-ID", request_id)
        return response


def create_app(config: ConfigData | None = None) -> FastAPI:
    """Build the application for ``config`` (the current context by default).

    The database engine is created on startup and disposed on shutdown; it is
    reachable only through ``app.state.app_dependencies``.
    """
    config = config or get_config()
    configure_logging(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Starting up application in {} environment", config.app.environment)
        database_service = DbSessionService(config.database, config.app.environment)
        DbManageService(database_service.engine).create_all()
        app.state.app_dependencies = ApplicationDependencies(
            database_service=database_service
        )
        try:
            yield
        finally:
            logger.info("Shutting down application")
            database_service.dispose()

    app = FastAPI(
        title="Books API",
        version=__version__,
        lifespan=lifespan,
        docs_url=None if config.app.environment == "production" else "/docs",
        redoc_url=None if config.app.environment == "production" else "/redoc",
    )
    app.middleware("http")(log_requests)
    register_exception_handlers(app)

    app.include_router(book_router)
    app.include_router(health_router)
    return app


app = create_app()

