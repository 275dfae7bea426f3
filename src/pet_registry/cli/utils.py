"""Shared utilities for CLI commands."""

from functools import lru_cache

from rich.console import Console

from src.pet_registry.core.services import DbSessionService

console = Console()


@lru_cache(maxsize=1)
def get_db_service() -> DbSessionService:
    """Build the database service once per process."""
    return DbSessionService()
