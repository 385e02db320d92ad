"""CLI command implementations for the Roster user directory.

This adapter maps CLI commands (create, get, deactivate, list, report,
clear) to DirectoryPort operations. It handles CLI-specific formatting
and error reporting: every command returns a result dictionary rather
than raising for expected failures.
"""

import logging
from typing import Any

from roster.core.errors import UserValidationError
from roster.core.models import UserStatus
from roster.core.ports import DirectoryPort

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to DirectoryPort."""

    def __init__(self, directory: DirectoryPort):
        """Initialize the CLI command handler.

        Args:
            directory: DirectoryPort implementation to execute commands.
        """
        self.directory = directory

    def create_user(
        self,
        name: str | None,
        email: str | None,
        age: int | None,
        is_admin: bool = False,
    ) -> dict[str, Any]:
        """Create a user via CLI.

        Returns:
            Dictionary with status and the created user, or an error message
            if validation failed.
        """
        try:
            user = self.directory.create_user(name, email, age, is_admin)  # type: ignore[arg-type]
        except UserValidationError as e:
            logger.error(f"Failed to create user: {e}")
            return {
                "status": "error",
                "operation": "create",
                "message": str(e),
            }

        return {
            "status": "success",
            "operation": "create",
            "data": user.to_dict(),
        }

    def get_user(self, user_id: str) -> dict[str, Any]:
        """Look up a user via CLI."""
        user = self.directory.get_user_by_id(user_id)
        if user is None:
            return {
                "status": "error",
                "operation": "get",
                "user_id": user_id,
                "message": f"User {user_id} not found",
            }

        return {
            "status": "success",
            "operation": "get",
            "data": user.to_dict(),
        }

    def deactivate_user(self, user_id: str, verbose: bool = False) -> dict[str, Any]:
        """Deactivate a user via CLI.

        Args:
            user_id: ID of the user.
            verbose: If True, log additional information.
        """
        if not self.directory.deactivate_user(user_id):
            return {
                "status": "error",
                "operation": "deactivate",
                "user_id": user_id,
                "message": f"User {user_id} not found or is an admin",
            }

        if verbose:
            logger.info(
                f"Deactivated user {user_id}",
                extra={"user_id": user_id, "verbose": True},
            )

        return {
            "status": "success",
            "operation": "deactivate",
            "user_id": user_id,
            "message": f"User {user_id} deactivated",
        }

    def list_users(
        self, status: str | None = None, output_format: str = "json"
    ) -> dict[str, Any]:
        """List users via CLI.

        Args:
            status: Optional status label ('ativo', 'inativo').
            output_format: Output format ('json', 'text'). Default 'json'.
        """
        status_filter: UserStatus | None = None
        if status is not None:
            try:
                status_filter = UserStatus(status)
            except ValueError:
                valid = ", ".join(s.value for s in UserStatus)
                return {
                    "status": "error",
                    "operation": "list",
                    "message": f"Invalid status: {status}. Valid options: {valid}",
                }

        users = self.directory.list_users(status=status_filter)

        if output_format == "json":
            data: Any = [user.to_dict() for user in users]
        elif output_format == "text":
            data = "\n".join(
                f"{user.id}  {user.name:<20} {user.email:<30} {user.status.value}"
                + ("  [admin]" if user.is_admin else "")
                for user in users
            )
        else:
            return {
                "status": "error",
                "operation": "list",
                "message": f"Unsupported format: {output_format}",
            }

        return {
            "status": "success",
            "operation": "list",
            "count": len(users),
            "data": data,
        }

    def report(self) -> dict[str, Any]:
        """Generate the user report via CLI."""
        return {
            "status": "success",
            "operation": "report",
            "data": self.directory.generate_user_report(),
        }

    def clear(self) -> dict[str, Any]:
        """Remove every user via CLI."""
        self.directory.clear_all()
        return {
            "status": "success",
            "operation": "clear",
            "message": "Directory cleared",
        }


def _require_user_id(args: dict[str, Any]) -> str:
    """Extract user_id from command arguments.

    Raises:
        ValueError: If user_id is missing or not a string.
    """
    if "user_id" not in args:
        raise ValueError("Missing required parameter: user_id")
    user_id = args["user_id"]
    if not isinstance(user_id, str):
        raise ValueError("Parameter user_id must be a string")
    return user_id


def run_command(
    directory: DirectoryPort,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Entry point for executing CLI commands. Maps command names to handler methods.

    Args:
        directory: DirectoryPort implementation.
        command: Command name.
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If command is not recognized or a required argument is
            missing or has the wrong type.
    """
    handler = CLICommandHandler(directory)

    if command == "create":
        return handler.create_user(
            args.get("name"),
            args.get("email"),
            args.get("age"),
            args.get("is_admin", False),
        )

    elif command == "get":
        return handler.get_user(_require_user_id(args))

    elif command == "deactivate":
        return handler.deactivate_user(
            _require_user_id(args),
            args.get("verbose", False),
        )

    elif command == "list":
        return handler.list_users(
            status=args.get("status"),
            output_format=args.get("format", "json"),
        )

    elif command == "report":
        return handler.report()

    elif command == "clear":
        return handler.clear()

    else:
        raise ValueError(f"Unknown command: {command}")
