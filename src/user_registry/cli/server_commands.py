"""Server startup CLI commands."""

import typer
from rich.panel import Panel
from sqlalchemy.exc import SQLAlchemyError

from .utils import console, require_database_url


def start(
    host: str | None = typer.Option(None, help="Host to bind the server to"),
    port: int | None = typer.Option(None, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
    skip_init: bool = typer.Option(
        False, "--skip-init", help="Do not create missing tables before starting"
    ),
) -> None:
    """
    🚀 Start the API server.

    Checks that DATABASE_URL is set, brings the schema up to date, then
    launches uvicorn.
    """
    require_database_url()

    import uvicorn

    from user_registry.runtime.context import get_config
    from user_registry.runtime.init_db import init_db

    config = get_config()

    if not skip_init:
        console.print("Bringing database schema up to date...")
        try:
            init_db()
        except SQLAlchemyError as e:
            console.print(f"[red]❌ Failed to initialize database: {e}[/red]")
            raise typer.Exit(code=1) from e

    bind_host = host or config.app.host
    bind_port = port or config.app.port
    console.print(
        Panel.fit(
            f"[bold green]Starting User Registry on {bind_host}:{bind_port}[/bold green]",
            border_style="green",
        )
    )

    uvicorn.run(
        "user_registry.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        access_log=False,  # Access logging happens in the middleware
    )
