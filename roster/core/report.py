"""Plain-text rendering of the user report."""

from collections.abc import Sequence

from .models import User

REPORT_HEADER = "--- Relatório de Usuários ---"
EMPTY_REPORT = "Nenhum usuário cadastrado."


def format_user_line(user: User) -> str:
    """Format a single report line."""
    return f"ID: {user.id}, Nome: {user.name}, Status: {user.status.value}"


def format_report(users: Sequence[User]) -> str:
    """Format the full report, one line per user in the given order."""
    if not users:
        return EMPTY_REPORT

    lines = [REPORT_HEADER]
    lines.extend(format_user_line(user) for user in users)
    return "\n".join(lines)
