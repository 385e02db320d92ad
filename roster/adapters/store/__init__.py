"""User store adapters.

Implementations:
- In-memory (process-local, insertion ordered)
"""

from .memory import InMemoryUserStore

__all__ = ["InMemoryUserStore"]
