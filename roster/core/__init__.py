"""Core domain logic for the Roster user directory.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .errors import MissingFieldsError, UnderageError, UserValidationError
from .models import User, UserStatus

__all__ = [
    "MissingFieldsError",
    "UnderageError",
    "User",
    "UserStatus",
    "UserValidationError",
]
