"""Schema management for the catalog database."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from src.catalog.core.services.database.db_session import DbSessionService


class DbManageService:
    def __init__(self, db_session_service: DbSessionService | None = None):
        self._db = db_session_service or DbSessionService()

    @property
    def engine(self) -> Engine:
        return self._db.engine

    def create_all(self) -> None:
        """Create all database tables."""
        from src.catalog.entities.service.product import ProductTable  # noqa: F401

        SQLModel.metadata.create_all(self.engine)
        logger.info("Database initialized with tables: {}", sorted(SQLModel.metadata.tables))

    def drop_all(self) -> None:
        """Drop all database tables."""
        from src.catalog.entities.service.product import ProductTable  # noqa: F401

        SQLModel.metadata.drop_all(self.engine)
        logger.warning("Dropped all database tables")
