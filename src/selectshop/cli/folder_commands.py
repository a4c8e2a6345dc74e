"""Folder inspection CLI commands."""

import typer
from rich.table import Table

from src.selectshop.core.services import FolderProductIndex, FolderRegistry
from src.selectshop.core.services.database import DbSessionService
from src.selectshop.entities.core.user import UserRepository

from .utils import console

folders_app = typer.Typer(help="Inspect users' folders")


@folders_app.command("list")
def list_folders(
    username: str = typer.Argument(..., help="Owner of the folders"),
) -> None:
    """List a user's folders with the number of products in each."""
    database_service = DbSessionService()
    rows: list[tuple[str, str, str]] = []
    with database_service.session_scope() as session:
        user = UserRepository(session).get_by_username(username)
        if user is not None:
            registry = FolderRegistry(session)
            index = FolderProductIndex(session)
            for summary in registry.get_folders(user):
                folder = registry.get_folder(summary.id, user)
                count = len(index.products_in(folder))
                rows.append((str(summary.id), summary.name, str(count)))

    if user is None:
        console.print(f"[red]❌ User '{username}' not found[/red]")
        raise typer.Exit(code=1)

    if not rows:
        console.print(f"[yellow]User '{username}' has no folders[/yellow]")
        return

    table = Table(title=f"Folders of '{username}'")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Products", style="magenta")
    for row in rows:
        table.add_row(*row)

    console.print(table)
    console.print(f"\n[green]Found {len(rows)} folders[/green]")
