"""Database schema CLI commands."""

import typer
from rich.prompt import Confirm
from sqlalchemy.exc import SQLAlchemyError

from .utils import console, require_database_url

db_app = typer.Typer(help="🗄️  Database schema commands")


@db_app.command("init")
def init() -> None:
    """Create any missing tables."""
    require_database_url()

    from user_registry.runtime.init_db import init_db

    try:
        init_db()
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to initialize database: {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print("[green]✅ Database schema is up to date[/green]")


@db_app.command("reset")
def reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
) -> None:
    """Drop and recreate every table. All users are lost."""
    require_database_url()

    if not force and not Confirm.ask(
        "[yellow]This deletes every stored user. Continue?[/yellow]"
    ):
        console.print("Aborted.")
        raise typer.Exit()

    from user_registry.core.services import DbManageService

    manager = DbManageService()
    try:
        manager.drop_all()
        manager.create_all()
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to reset database: {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print("[green]✅ Database reset[/green]")
