"""Schema management for the registered table models."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel


def _register_tables() -> None:
    # importing the table modules registers them on SQLModel.metadata
    from src.pet_registry.entities.service.pet import PetTable  # noqa: F401


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all database tables."""
        _register_tables()
        SQLModel.metadata.create_all(self._engine)
        logger.info(
            "Database initialized with tables: {}",
            sorted(SQLModel.metadata.tables),
        )

    def drop_all(self) -> None:
        """Drop all database tables."""
        _register_tables()
        SQLModel.metadata.drop_all(self._engine)
        logger.warning("Dropped all database tables")
