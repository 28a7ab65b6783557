"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import Engine, StaticPool, text
from sqlmodel import Session, create_engine

from books_api.runtime.config.config_data import DatabaseConfig


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig, environment: str = "development"):
        """Create the process-wide engine for ``db_config``.

        The instance is owned by the application lifespan; call :meth:`dispose`
        on shutdown.
        """
        logger.info("Configuring database engine for environment: {}", environment)
        self._db_config = db_config
        self._engine = create_engine(
            db_config.url, **self._get_engine_kwargs(db_config, environment)
        )

    @staticmethod
    def _get_engine_kwargs(db_config: DatabaseConfig, environment: str) -> dict[str, Any]:
        """Get backend-specific engine arguments."""
        engine_kwargs: dict[str, Any] = {"echo": db_config.echo}

        if db_config.is_sqlite:
            engine_kwargs["connect_args"] = {
                "check_same_thread": False,  # Sessions cross FastAPI's threadpool
                "timeout": 20,  # Lock timeout
            }
            if db_config.is_in_memory:
                # One shared connection, otherwise every checkout sees an empty database
                engine_kwargs["poolclass"] = StaticPool

            if environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )
        else:
            engine_kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                    "pool_pre_ping": True,  # Validate connections before use
                }
            )

        return engine_kwargs

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,  # Prevent lazy loading issues
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session that is always closed afterwards.

        Repositories commit their own writes, so nothing is committed here.
        """
        db = self.get_session()
        try:
            yield db
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error(
                "Database health check failed: {}: {}", type(e).__name__, e
            )
            return False

    def dispose(self) -> None:
        """Release every pooled connection."""
        logger.info("Disposing database engine")
        self._engine.dispose()
