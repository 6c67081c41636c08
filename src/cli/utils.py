"""Shared utilities for CLI commands."""

from functools import lru_cache

from rich.console import Console

from src.users_service.core.services import DbSessionService

# Initialize Rich console for colored output
console = Console()


@lru_cache(maxsize=1)
def get_database_service() -> DbSessionService:
    """Build the database service once per process from the current config."""
    return DbSessionService()
