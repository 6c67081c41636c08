"""Server and database CLI commands."""

import typer
from rich.panel import Panel

from src.users_service.runtime.context import get_config

from .utils import console, get_database_service


def init_db() -> None:
    """🗄️  Create the database tables."""
    database_service = get_database_service()
    database_service.create_all()
    console.print(
        f"[green]✅ Tables created on {database_service.backend} database[/green]"
    )


def serve(
    host: str | None = typer.Option(None, help="Host to bind (defaults to config)"),
    port: int | None = typer.Option(None, help="Port to bind (defaults to config)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """
    🚀 Start the API server with uvicorn.
    """
    import uvicorn

    app_config = get_config().app
    bind_host = host or app_config.host
    bind_port = port or app_config.port

    console.print(
        Panel.fit(
            f"[bold green]Starting Users Service on {bind_host}:{bind_port}[/bold green]",
            border_style="green",
        )
    )
    uvicorn.run(
        "src.users_service.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        access_log=False,
    )


def register_dev_commands(app: typer.Typer) -> None:
    app.command(name="init-db")(init_db)
    app.command(name="serve")(serve)
