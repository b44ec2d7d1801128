"""Shared utilities for CLI commands."""

from rich.console import Console

from src.catalog.core.services import DbSessionService

# Initialize Rich console for colored output
console = Console()


def get_database_service() -> DbSessionService:
    """Database service bound to the current configuration."""
    return DbSessionService()
