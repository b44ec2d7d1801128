"""Database and server CLI commands."""

import typer
from rich.panel import Panel

from src.catalog.core.services import DbManageService
from src.catalog.runtime.context import get_config

from .utils import console, get_database_service


def init_db() -> None:
    """Create every table for the configured database."""
    DbManageService(get_database_service()).create_all()
    console.print("[green]✅ Database tables created[/green]")


def drop_db(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
) -> None:
    """Drop every table, deleting all stored products."""
    if not yes:
        typer.confirm("Drop all tables and delete every product?", abort=True)
    DbManageService(get_database_service()).drop_all()
    console.print("[yellow]🗑️  Database tables dropped[/yellow]")


def serve(
    host: str = typer.Option("0.0.0.0", help="Host to bind the server to"),
    port: int | None = typer.Option(
        None, help="Port to bind the server to (defaults to app.port)"
    ),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Run the API under uvicorn."""
    import uvicorn

    bind_port = port or get_config().app.port
    console.print(
        Panel.fit(
            f"[bold green]Starting Product Catalog API[/bold green]\n"
            f"http://{host}:{bind_port}",
            border_style="green",
        )
    )
    uvicorn.run(
        "src.catalog.api.http.app:create_app",
        factory=True,
        host=host,
        port=bind_port,
        reload=reload,
        access_log=False,  # Requests are logged by the middleware
    )
