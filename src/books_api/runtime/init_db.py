"""Database initialization script."""

from books_api.core.services.database.db_manage import DbManageService
from books_api.core.services.database.db_session import DbSessionService
from books_api.runtime.config.config_data import ConfigData
from books_api.runtime.context import get_config


def init_db(config: ConfigData | None = None) -> None:
    """Create all database tables for the configured database."""
    config = config or get_config()
    database_service = DbSessionService(config.database, config.app.environment)
    try:
        DbManageService(database_service.engine).create_all()
    finally:
        database_service.dispose()


if __name__ == "__main__":
    init_db()
