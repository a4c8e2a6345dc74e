"""Database CLI commands."""

import typer
from rich.prompt import Confirm

from src.selectshop.core.services.database import DbManageService, DbSessionService
from src.selectshop.runtime.init_db import init_db

from .utils import console

db_app = typer.Typer(help="Manage the application database")


@db_app.command("init")
def init() -> None:
    """Create all tables that do not exist yet."""
    init_db()
    console.print("[green]✅ Database initialized[/green]")


@db_app.command("reset")
def reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop and recreate every table."""
    if not force and not Confirm.ask("[red]Drop all tables and their data?[/red]"):
        console.print("[yellow]Aborted[/yellow]")
        raise typer.Exit(code=1)

    database_service = DbSessionService()
    manager = DbManageService(database_service.engine)
    manager.drop_all()
    manager.create_all()
    console.print("[green]✅ Database reset[/green]")
