"""Tests for the Typer CLI."""

import re
from uuid import uuid4

import pytest
from typer.testing import CliRunner

from userhub.presentation.api import dependencies
from userhub.presentation.cli.app import app

runner = CliRunner()

UUID_PATTERN = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}")


def _clear_database_caches() -> None:
    dependencies.get_database_url.cache_clear()
    dependencies.get_engine.cache_clear()
    dependencies.get_session_maker.cache_clear()


@pytest.fixture(autouse=True)
def cli_database(tmp_path, monkeypatch):
    """Point the CLI at a throwaway SQLite file."""
    monkeypatch.setenv("DATABASE_DRIVER", "sqlite")
    monkeypatch.setenv("SQLITE_PATH", str(tmp_path / "cli-test.db"))
    monkeypatch.setenv("PASSWORD_HASH_ROUNDS", "4")
    _clear_database_caches()
    yield
    _clear_database_caches()


def _create(name: str, email: str, password: str = "p", confirm: str = "p"):
    return runner.invoke(
        app,
        ["users", "create", "--name", name, "--email", email],
        input=f"{password}\n{confirm}\n",
    )


def test_db_init():
    result = runner.invoke(app, ["db", "init"])

    assert result.exit_code == 0
    assert "up to date" in result.output


def test_list_empty():
    result = runner.invoke(app, ["users", "list"])

    assert result.exit_code == 0
    assert "No users" in result.output


def test_create_and_list():
    created = _create("Ana", "a@x")
    listed = runner.invoke(app, ["users", "list"])

    assert created.exit_code == 0
    assert "Created user" in created.output
    assert listed.exit_code == 0
    assert "a@x" in listed.output


def test_create_with_mismatched_confirmation():
    result = _create("Ana", "a@x", password="p", confirm="q")

    assert result.exit_code == 1
    assert "Password confirmation does not match" in result.output


def test_create_duplicate_email():
    _create("Ana", "a@x")

    result = _create("Other", "a@x")

    assert result.exit_code == 1
    assert "Email already taken" in result.output


def test_delete():
    _create("Ana", "a@x")
    listed = runner.invoke(app, ["users", "list"])
    user_id = UUID_PATTERN.search(listed.output).group(0)

    result = runner.invoke(app, ["users", "delete", user_id])

    assert result.exit_code == 0
    assert "No users" in runner.invoke(app, ["users", "list"]).output


def test_delete_unknown():
    result = runner.invoke(app, ["users", "delete", str(uuid4())])

    assert result.exit_code == 1
    assert "Failed to delete user" in result.output
