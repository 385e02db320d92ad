"""Port interfaces for the Roster user directory.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - UserStorePort: Hold and query user records

2. **Driving Ports** (adapters/external systems call into core)
   - DirectoryPort: Create, look up, deactivate and report on users
"""

from abc import ABC, abstractmethod

from .models import User, UserStatus


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class UserStorePort(ABC):
    """Port for holding user records.

    Implementations must:
    - Preserve insertion order when listing
    - Return copies, so callers cannot mutate stored records directly
    - Reject duplicate ids
    """

    @abstractmethod
    def add(self, user: User) -> str:
        """Store a new user.

        Args:
            user: User to store. The id field is assigned by the caller.

        Returns:
            The user ID.

        Raises:
            ValueError: If a user with the same ID already exists.
        """

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Retrieve a user by ID.

        Returns:
            A copy of the stored User if found, None otherwise.
        """

    @abstractmethod
    def update(self, user: User) -> None:
        """Replace a stored user with new state.

        Raises:
            ValueError: If the user doesn't exist.
        """

    @abstractmethod
    def get_all(self, status: UserStatus | None = None) -> list[User]:
        """Get all users in insertion order, optionally filtered by status."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored users."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every stored user."""


# ============================================================================
# DRIVING PORTS (Adapters/external systems call into core)
# ============================================================================


class DirectoryPort(ABC):
    """Port for operations on the user directory.

    Driving port: the CLI adapter or a library caller invokes these methods.
    Implementations live in the core (directory_service.py).
    """

    @abstractmethod
    def create_user(
        self, name: str, email: str, age: int, is_admin: bool = False
    ) -> User:
        """Create and store a new active user.

        Raises:
            MissingFieldsError: If name, email or age is missing.
            UnderageError: If age is below the adult age.
        """

    @abstractmethod
    def get_user_by_id(self, user_id: str) -> User | None:
        """Look up a user. Returns None for unknown ids."""

    @abstractmethod
    def deactivate_user(self, user_id: str) -> bool:
        """Deactivate a non-admin user.

        Returns:
            True if the user is now inactive, False if the user doesn't
            exist or is an admin.
        """

    @abstractmethod
    def list_users(self, status: UserStatus | None = None) -> list[User]:
        """List users in insertion order, optionally filtered by status."""

    @abstractmethod
    def generate_user_report(self) -> str:
        """Render a human-readable report of every user."""

    @abstractmethod
    def clear_all(self) -> None:
        """Empty the directory."""
