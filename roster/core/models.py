"""Domain models for the Roster user directory.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class UserStatus(Enum):
    """Lifecycle states for a user record.

    Users start ACTIVE. The only transition exposed is ACTIVE -> INACTIVE
    (see User.deactivate). Values are the labels shown in reports.
    """

    ACTIVE = "ativo"
    INACTIVE = "inativo"


@dataclass
class User:
    """A single user record held by the directory.

    State Transitions:
        - ACTIVE → INACTIVE (deactivate, non-admin users only)

    Note: This dataclass is intentionally mutable so the directory can
    update status in place. Stores hand out copies, so mutating a
    returned User never changes stored state without an explicit update.
    """

    id: str  # UUID
    name: str
    email: str
    age: int
    is_admin: bool = False
    status: UserStatus = UserStatus.ACTIVE

    def __post_init__(self) -> None:
        """Validate user invariants on creation."""
        if not self.id or not self.id.strip():
            raise ValueError("id must be a non-empty string")
        if self.age < 0:
            raise ValueError(f"age must be non-negative, got {self.age}")

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE

    def deactivate(self) -> None:
        """Transition user to inactive status.

        Deactivating an already inactive user is a no-op.
        """
        if self.is_admin:
            raise ValueError(f"Admin user {self.id} cannot be deactivated")
        self.status = UserStatus.INACTIVE

    def to_dict(self) -> dict[str, Any]:
        """Render the record as a plain dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "age": self.age,
            "is_admin": self.is_admin,
            "status": self.status.value,
        }
