"""Schema management for the product database."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from product_catalog.entities.service.product import ProductTable


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all database tables that do not exist yet."""
        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables: {}", ProductTable.__tablename__)

    def drop_all(self) -> None:
        """Drop every table owned by the application."""
        SQLModel.metadata.drop_all(self._engine)
        logger.warning("Dropped tables: {}", ProductTable.__tablename__)
