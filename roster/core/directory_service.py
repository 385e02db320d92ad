"""Directory service: implements DirectoryPort over a UserStorePort.

This is the core service behind every user operation. It validates
creation requests, assigns ids, applies the deactivation rule and
renders the report. State changes are logged for auditing.
"""

import logging
import uuid
from collections.abc import Callable

from .errors import (
    INVALID_ADMIN_FLAG_MESSAGE,
    INVALID_AGE_MESSAGE,
    INVALID_TEXT_MESSAGE,
    MissingFieldsError,
    UnderageError,
    UserValidationError,
)
from .models import User, UserStatus
from .ports import DirectoryPort, UserStorePort
from .report import format_report

logger = logging.getLogger(__name__)

DEFAULT_ADULT_AGE = 18


def _new_user_id() -> str:
    return str(uuid.uuid4())


def _is_blank(value: str | None) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class UserDirectoryService(DirectoryPort):
    """Core implementation of DirectoryPort.

    Coordinates validation and state changes with the user store.
    """

    def __init__(
        self,
        store: UserStorePort,
        adult_age: int = DEFAULT_ADULT_AGE,
        id_factory: Callable[[], str] = _new_user_id,
    ):
        """Initialize the directory service.

        Args:
            store: UserStorePort implementation holding the records.
            adult_age: Minimum age accepted at creation.
            id_factory: Callable producing a fresh user id.
        """
        if adult_age < 0:
            raise ValueError(f"adult_age must be non-negative, got {adult_age}")
        self.store = store
        self.adult_age = adult_age
        self.id_factory = id_factory

    def create_user(
        self, name: str, email: str, age: int, is_admin: bool = False
    ) -> User:
        """Create and store a new active user.

        Args:
            name: Display name, required.
            email: Email address, required.
            age: Age in years, required and at least adult_age.
            is_admin: Admin users can never be deactivated.

        Returns:
            A copy of the stored user.

        Raises:
            MissingFieldsError: If name, email or age is missing.
            UserValidationError: If name or email is not a string, age is not
                an integer or is_admin is not a bool.
            UnderageError: If age is below adult_age.
            ValueError: If the generated id collides with a stored user.
        """
        if _is_blank(name) or _is_blank(email) or age is None:
            logger.warning(
                "Rejected user creation: missing required fields",
                extra={"has_name": not _is_blank(name), "has_email": not _is_blank(email)},
            )
            raise MissingFieldsError()

        if not isinstance(name, str) or not isinstance(email, str):
            raise UserValidationError(INVALID_TEXT_MESSAGE)

        # bool is an int subclass
        if isinstance(age, bool) or not isinstance(age, int):
            raise UserValidationError(INVALID_AGE_MESSAGE)

        if not isinstance(is_admin, bool):
            raise UserValidationError(INVALID_ADMIN_FLAG_MESSAGE)

        if age < self.adult_age:
            logger.warning(
                "Rejected user creation: underage",
                extra={"age": age, "adult_age": self.adult_age},
            )
            raise UnderageError()

        user = User(
            id=self.id_factory(),
            name=name,
            email=email,
            age=age,
            is_admin=is_admin,
        )
        self.store.add(user)

        logger.info(
            f"User {user.id} created",
            extra={"user_id": user.id, "is_admin": user.is_admin},
        )

        return self.store.get_by_id(user.id) or user

    def get_user_by_id(self, user_id: str) -> User | None:
        """Look up a user by id.

        Returns:
            The user, or None if no user has this id.
        """
        user = self.store.get_by_id(user_id)

        logger.debug(
            f"Lookup for user {user_id}: {'found' if user else 'not found'}",
            extra={"user_id": user_id},
        )

        return user

    def deactivate_user(self, user_id: str) -> bool:
        """Deactivate a non-admin user.

        Args:
            user_id: ID of the user.

        Returns:
            True if the user is now inactive. False if the user doesn't
            exist or is an admin; the stored record is left unchanged.
        """
        user = self.store.get_by_id(user_id)
        if user is None:
            logger.warning(
                f"Cannot deactivate user {user_id}: not found",
                extra={"user_id": user_id},
            )
            return False

        # Admin protection is enforced by the domain guard clause
        try:
            user.deactivate()
        except ValueError as e:
            logger.warning(
                f"Cannot deactivate user: {e}",
                extra={"user_id": user_id, "is_admin": user.is_admin},
            )
            return False

        self.store.update(user)

        logger.info(
            f"User {user_id} deactivated",
            extra={"user_id": user_id},
        )

        return True

    def list_users(self, status: UserStatus | None = None) -> list[User]:
        """List users in insertion order, optionally filtered by status."""
        users = self.store.get_all(status=status)

        logger.debug(
            "Listed users" + (f" with status={status.value}" if status else ""),
            extra={"count": len(users)},
        )

        return users

    def generate_user_report(self) -> str:
        """Render the user report.

        Returns:
            "Nenhum usuário cadastrado." when the directory is empty,
            otherwise a header line followed by one line per user.
        """
        return format_report(self.store.get_all())

    def clear_all(self) -> None:
        """Remove every user from the directory."""
        removed = self.store.count()
        self.store.clear()

        logger.info(
            "Directory cleared",
            extra={"removed": removed},
        )
