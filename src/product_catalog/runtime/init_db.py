"""Database initialization script.

Usage::

    python -m product_catalog.runtime.init_db
"""

from product_catalog.api.utils.app_startup import configure_logging
from product_catalog.core.services.database import DbManageService, DbSessionService


def init_db() -> None:
    """Create all database tables for the configured database."""
    database_service = DbSessionService()
    try:
        DbManageService(database_service.engine).create_all()
    finally:
        database_service.dispose()


if __name__ == "__main__":
    configure_logging()
    init_db()
