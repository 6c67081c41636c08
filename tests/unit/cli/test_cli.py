"""Tests for the users-service command line interface."""

import pytest
from typer.testing import CliRunner

from src.cli import app
from src.users_service.core.services import DbSessionService
from src.users_service.entities.user import User, UserRepository

runner = CliRunner()


@pytest.fixture
def cli_database(monkeypatch, database_service: DbSessionService) -> DbSessionService:
    """Point every CLI command at the in-memory test database."""
    monkeypatch.setattr("src.cli.user_commands.get_database_service", lambda: database_service)
    monkeypatch.setattr("src.cli.dev_commands.get_database_service", lambda: database_service)
    return database_service


def _stored_users(database_service: DbSessionService) -> list[User]:
    with database_service.session_scope() as session:
        return UserRepository(session).list_all()


class TestUserCommands:
    def test_add_user(self, cli_database: DbSessionService):
        result = runner.invoke(app, ["users", "add", "Jane", "--phone", "123"])

        assert result.exit_code == 0, result.output
        assert "Created user 1" in result.output
        assert _stored_users(cli_database) == [User(id=1, name="Jane", phone="123")]

    def test_add_duplicate_phone_fails(self, cli_database: DbSessionService):
        runner.invoke(app, ["users", "add", "A", "-p", "999"])

        result = runner.invoke(app, ["users", "add", "B", "-p", "999"])

        assert result.exit_code == 1
        assert "User with such phone already exists" in result.output
        assert [user.name for user in _stored_users(cli_database)] == ["A"]

    def test_add_blank_name_fails(self, cli_database: DbSessionService):
        result = runner.invoke(app, ["users", "add", "  "])

        assert result.exit_code == 1
        assert "User name is mandatory" in result.output

    def test_list_users(self, cli_database: DbSessionService):
        runner.invoke(app, ["users", "add", "Jane", "-p", "123"])
        runner.invoke(app, ["users", "add", "Mary"])

        result = runner.invoke(app, ["users", "list"])

        assert result.exit_code == 0
        assert "Jane" in result.output
        assert "Mary" in result.output
        assert "Found 2 users" in result.output

    def test_list_users_empty(self, cli_database: DbSessionService):
        result = runner.invoke(app, ["users", "list"])

        assert result.exit_code == 0
        assert "No users found" in result.output

    def test_find_users(self, cli_database: DbSessionService):
        runner.invoke(app, ["users", "add", "Courteney"])
        runner.invoke(app, ["users", "add", "Jennifer"])

        result = runner.invoke(app, ["users", "find", "court"])

        assert result.exit_code == 0
        assert "Courteney" in result.output
        assert "Jennifer" not in result.output

    def test_remove_user(self, cli_database: DbSessionService):
        runner.invoke(app, ["users", "add", "Jane"])

        result = runner.invoke(app, ["users", "remove", "1"])

        assert result.exit_code == 0
        assert "Removed user 1" in result.output
        assert _stored_users(cli_database) == []

    def test_remove_unknown_user_fails(self, cli_database: DbSessionService):
        result = runner.invoke(app, ["users", "remove", "99"])

        assert result.exit_code == 1
        assert "No user with id 99" in result.output


class TestDevCommands:
    def test_init_db(self, cli_database: DbSessionService):
        result = runner.invoke(app, ["init-db"])

        assert result.exit_code == 0
        assert "Tables created on sqlite database" in result.output

    def test_serve_runs_uvicorn(self, monkeypatch):
        calls = []
        monkeypatch.setattr("uvicorn.run", lambda *args, **kwargs: calls.append((args, kwargs)))

        result = runner.invoke(app, ["serve", "--host", "0.0.0.0", "--port", "9001"])

        assert result.exit_code == 0, result.output
        assert calls == [
            (
                ("src.users_service.api.http.app:app",),
                {"host": "0.0.0.0", "port": 9001, "reload": False, "access_log": False},
            )
        ]
