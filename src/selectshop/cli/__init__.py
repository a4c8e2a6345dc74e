"""Main CLI application module."""

import typer

from src.selectshop.api.utils.app_startup import configure_logging

from .db_commands import db_app
from .folder_commands import folders_app
from .server_commands import serve

app = typer.Typer(
    help="SelectShop API management tool",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(db_app, name="db")
app.add_typer(folders_app, name="folders")
app.command(name="serve")(serve)


def main() -> None:
    """Main entry point for the CLI."""
    configure_logging()
    app()


if __name__ == "__main__":
    main()
