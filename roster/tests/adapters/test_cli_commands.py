"""Tests for CLI command handling.

Tests verify that CLICommandHandler and run_command:
- Delegate to the DirectoryPort
- Return result dictionaries with a status of "success" or "error"
- Turn validation failures into error results
"""

import pytest

from roster.adapters.cli.commands import CLICommandHandler, run_command
from roster.adapters.store.memory import InMemoryUserStore
from roster.core.directory_service import UserDirectoryService
from roster.core.models import User, UserStatus
from roster.tests.fakes import FakeDirectoryPort


@pytest.fixture
def directory() -> FakeDirectoryPort:
    """Create a fake directory port."""
    return FakeDirectoryPort()


@pytest.fixture
def handler(directory: FakeDirectoryPort) -> CLICommandHandler:
    """Create a CLI handler over the fake directory."""
    return CLICommandHandler(directory)


@pytest.fixture
def real_directory() -> UserDirectoryService:
    """Create a real directory service over the in-memory store."""
    return UserDirectoryService(store=InMemoryUserStore())


class TestCreateCommand:
    """Test the create command."""

    def test_create_success(
        self, handler: CLICommandHandler, directory: FakeDirectoryPort
    ) -> None:
        result = handler.create_user("Alice", "alice@email.com", 28)

        assert result["status"] == "success"
        assert result["operation"] == "create"
        assert result["data"]["id"] == "user-1"
        assert result["data"]["status"] == "ativo"
        assert directory.created == [("Alice", "alice@email.com", 28, False)]

    def test_create_missing_fields(self, handler: CLICommandHandler) -> None:
        result = handler.create_user("Alice", None, 28)

        assert result["status"] == "error"
        assert result["message"] == "Nome, email e idade são obrigatórios."

    def test_create_underage_with_real_service(
        self, real_directory: UserDirectoryService
    ) -> None:
        result = CLICommandHandler(real_directory).create_user(
            "Menor", "menor@email.com", 17
        )

        assert result["status"] == "error"
        assert result["message"] == "O usuário deve ser maior de idade."

    def test_unexpected_errors_propagate(
        self, handler: CLICommandHandler, directory: FakeDirectoryPort
    ) -> None:
        directory.should_fail = True

        with pytest.raises(RuntimeError, match="Directory operation failed"):
            handler.create_user("Alice", "alice@email.com", 28)


class TestGetCommand:
    """Test the get command."""

    def test_get_existing(
        self, handler: CLICommandHandler, directory: FakeDirectoryPort
    ) -> None:
        directory.add_user(User(id="u1", name="Alice", email="alice@email.com", age=28))

        result = handler.get_user("u1")

        assert result["status"] == "success"
        assert result["data"]["name"] == "Alice"

    def test_get_unknown(self, handler: CLICommandHandler) -> None:
        result = handler.get_user("id-fake-123")

        assert result["status"] == "error"
        assert "not found" in result["message"]


class TestDeactivateCommand:
    """Test the deactivate command."""

    def test_deactivate_success(
        self, handler: CLICommandHandler, directory: FakeDirectoryPort
    ) -> None:
        directory.add_user(User(id="u1", name="Alice", email="alice@email.com", age=28))

        result = handler.deactivate_user("u1", verbose=True)

        assert result["status"] == "success"
        assert directory.deactivated == ["u1"]
        assert directory.users["u1"].status == UserStatus.INACTIVE

    def test_deactivate_admin(
        self, handler: CLICommandHandler, directory: FakeDirectoryPort
    ) -> None:
        directory.add_user(
            User(id="a1", name="Admin", email="admin@email.com", age=40, is_admin=True)
        )

        result = handler.deactivate_user("a1")

        assert result["status"] == "error"
        assert directory.users["a1"].status == UserStatus.ACTIVE


class TestListCommand:
    """Test the list command."""

    def test_list_json(
        self, handler: CLICommandHandler, directory: FakeDirectoryPort
    ) -> None:
        directory.create_user("Alice", "alice@email.com", 28)
        directory.create_user("Bob", "bob@email.com", 32)

        result = handler.list_users()

        assert result["status"] == "success"
        assert result["count"] == 2
        assert [u["name"] for u in result["data"]] == ["Alice", "Bob"]

    def test_list_by_status(
        self, handler: CLICommandHandler, directory: FakeDirectoryPort
    ) -> None:
        handler.list_users(status="inativo")
        assert directory.list_calls == [UserStatus.INACTIVE]

    def test_list_invalid_status(self, handler: CLICommandHandler) -> None:
        result = handler.list_users(status="deleted")

        assert result["status"] == "error"
        assert "Invalid status" in result["message"]

    def test_list_text(
        self, handler: CLICommandHandler, directory: FakeDirectoryPort
    ) -> None:
        directory.add_user(
            User(id="a1", name="Admin", email="admin@email.com", age=40, is_admin=True)
        )

        result = handler.list_users(output_format="text")

        assert "a1" in result["data"]
        assert "[admin]" in result["data"]

    def test_list_unsupported_format(self, handler: CLICommandHandler) -> None:
        result = handler.list_users(output_format="xml")

        assert result["status"] == "error"
        assert "Unsupported format" in result["message"]


class TestReportAndClear:
    """Test the report and clear commands."""

    def test_report(
        self, handler: CLICommandHandler, directory: FakeDirectoryPort
    ) -> None:
        result = handler.report()

        assert result["data"] == "Nenhum usuário cadastrado."
        assert directory.report_call_count == 1

    def test_clear(
        self, handler: CLICommandHandler, directory: FakeDirectoryPort
    ) -> None:
        directory.create_user("Alice", "alice@email.com", 28)

        result = handler.clear()

        assert result["status"] == "success"
        assert directory.clear_call_count == 1
        assert directory.users == {}


class TestRunCommand:
    """Test command dispatch."""

    def test_full_flow_with_real_service(
        self, real_directory: UserDirectoryService
    ) -> None:
        created = run_command(
            real_directory,
            "create",
            {"name": "Alice", "email": "alice@email.com", "age": 28},
        )
        user_id = created["data"]["id"]

        assert run_command(real_directory, "deactivate", {"user_id": user_id})["status"] == "success"
        fetched = run_command(real_directory, "get", {"user_id": user_id})
        assert fetched["data"]["status"] == "inativo"

        report = run_command(real_directory, "report", {})
        assert f"ID: {user_id}, Nome: Alice, Status: inativo" in report["data"]

        run_command(real_directory, "clear", {})
        assert run_command(real_directory, "list", {})["count"] == 0

    @pytest.mark.parametrize("command", ["get", "deactivate"])
    def test_missing_user_id(self, directory: FakeDirectoryPort, command: str) -> None:
        with pytest.raises(ValueError, match="Missing required parameter: user_id"):
            run_command(directory, command, {})

    @pytest.mark.parametrize("command", ["get", "deactivate"])
    @pytest.mark.parametrize("user_id", [["x"], {"id": "x"}, 42, None])
    def test_non_string_user_id(
        self, directory: FakeDirectoryPort, command: str, user_id
    ) -> None:
        with pytest.raises(ValueError, match="Parameter user_id must be a string"):
            run_command(directory, command, {"user_id": user_id})
        assert directory.deactivated == []

    def test_create_with_non_string_fields(
        self, real_directory: UserDirectoryService
    ) -> None:
        result = run_command(
            real_directory, "create", {"name": 123, "email": ["x"], "age": 30}
        )

        assert result["status"] == "error"
        assert result["message"] == "Nome e email devem ser textos."
        assert real_directory.list_users() == []

    def test_create_with_string_admin_flag(
        self, real_directory: UserDirectoryService
    ) -> None:
        result = run_command(
            real_directory,
            "create",
            {"name": "Alice", "email": "alice@email.com", "age": 28, "is_admin": "false"},
        )

        assert result["status"] == "error"
        assert real_directory.list_users() == []

    def test_create_with_json_boolean_admin_flag(
        self, real_directory: UserDirectoryService
    ) -> None:
        result = run_command(
            real_directory,
            "create",
            {"name": "Admin", "email": "admin@email.com", "age": 40, "is_admin": True},
        )

        assert result["status"] == "success"
        assert result["data"]["is_admin"] is True

    def test_unknown_command(self, directory: FakeDirectoryPort) -> None:
        with pytest.raises(ValueError, match="Unknown command: delete"):
            run_command(directory, "delete", {"user_id": "u1"})
