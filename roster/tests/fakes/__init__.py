"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic and adapters
to be tested in isolation:

- FakeUserStorePort: In-memory user storage with call tracking
- FakeDirectoryPort: Captured directory operations
"""

from .directory import FakeDirectoryPort
from .store import FakeUserStorePort

__all__ = [
    "FakeDirectoryPort",
    "FakeUserStorePort",
]
