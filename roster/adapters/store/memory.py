"""In-memory user store.

Implements UserStorePort with an insertion-ordered dict keyed by user id.
State lives for the lifetime of the process only.
"""

import logging
from dataclasses import replace

from roster.core.models import User, UserStatus
from roster.core.ports import UserStorePort

logger = logging.getLogger(__name__)


class InMemoryUserStore(UserStorePort):
    """Process-local user store.

    Records are copied on the way in and on the way out so that the only
    way to change a stored user is through update().
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def add(self, user: User) -> str:
        """Store a new user.

        Raises:
            ValueError: If a user with the same ID already exists.
        """
        if user.id in self._users:
            raise ValueError(f"User {user.id} already exists")

        self._users[user.id] = replace(user)
        logger.debug(f"Stored user {user.id}", extra={"user_id": user.id})
        return user.id

    def get_by_id(self, user_id: str) -> User | None:
        user = self._users.get(user_id)
        return replace(user) if user is not None else None

    def update(self, user: User) -> None:
        """Replace a stored user, keeping its position in insertion order.

        Raises:
            ValueError: If the user doesn't exist.
        """
        if user.id not in self._users:
            raise ValueError(f"User {user.id} not found")

        self._users[user.id] = replace(user)
        logger.debug(f"Updated user {user.id}", extra={"user_id": user.id})

    def get_all(self, status: UserStatus | None = None) -> list[User]:
        return [
            replace(user)
            for user in self._users.values()
            if status is None or user.status == status
        ]

    def count(self) -> int:
        return len(self._users)

    def clear(self) -> None:
        self._users.clear()
