"""Tests for the selectshop command line."""

import pytest
from sqlalchemy import inspect
from typer.testing import CliRunner

from src.selectshop.cli import app
from src.selectshop.core.services import DbSessionService

runner = CliRunner()


@pytest.fixture
def cli_database(engine, monkeypatch) -> DbSessionService:
    """Point every command at the in-memory test engine."""
    service = DbSessionService(engine=engine)
    for module in (
        "src.selectshop.cli.folder_commands",
        "src.selectshop.cli.db_commands",
        "src.selectshop.runtime.init_db",
    ):
        monkeypatch.setattr(f"{module}.DbSessionService", lambda: service)
    return service


class TestFoldersList:
    def test_lists_folders_with_product_counts(
        self, cli_database, owner, make_folder, make_product, link_product
    ):
        electronics = make_folder("electronics", owner)
        make_folder("clothes", owner)
        link_product(make_product("ipad", owner), electronics)

        result = runner.invoke(app, ["folders", "list", owner.username])

        assert result.exit_code == 0, result.output
        assert "electronics" in result.output
        assert "clothes" in result.output
        assert "Found 2 folders" in result.output

    def test_user_without_folders(self, cli_database, owner):
        result = runner.invoke(app, ["folders", "list", owner.username])

        assert result.exit_code == 0
        assert "has no folders" in result.output

    def test_unknown_user(self, cli_database):
        result = runner.invoke(app, ["folders", "list", "nobody"])

        assert result.exit_code == 1
        assert "not found" in result.output


class TestDbCommands:
    def test_init_creates_tables(self, cli_database, engine):
        result = runner.invoke(app, ["db", "init"])

        assert result.exit_code == 0
        assert {"users", "folders", "products", "folder_products"} <= set(
            inspect(engine).get_table_names()
        )

    def test_reset_without_confirmation_aborts(self, cli_database, owner, make_folder):
        make_folder("keep", owner)

        result = runner.invoke(app, ["db", "reset"], input="n\n")

        assert result.exit_code == 1
        assert "Aborted" in result.output

    def test_forced_reset_empties_tables(self, cli_database, owner, make_folder):
        make_folder("gone", owner)

        result = runner.invoke(app, ["db", "reset", "--force"])

        assert result.exit_code == 0
        listed = runner.invoke(app, ["folders", "list", owner.username])
        assert listed.exit_code == 1
