"""Shared helpers for CLI commands."""

import os

import typer
from rich.console import Console

from user_registry.runtime.config.settings import EnvironmentVariables

console = Console()


def require_database_url() -> EnvironmentVariables:
    """Load process settings, exiting when no database URL is supplied."""
    settings = EnvironmentVariables()
    if not settings.database_url:
        console.print("[red]❌ DATABASE_URL environment variable is not set![/red]")
        raise typer.Exit(code=1)

    # config.yaml reads the URL back from the environment; a value that only
    # lives in .env must be exported before the configuration is loaded
    os.environ.setdefault("DATABASE_URL", settings.database_url)
    os.environ.setdefault("APP_ENVIRONMENT", settings.app_environment)
    os.environ.setdefault("APP_CONFIG_FILE", settings.app_config_file)
    return settings
