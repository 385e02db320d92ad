"""External adapters for the Roster user directory.

This package provides implementations of the core port interfaces and the
surfaces that drive the core.

Adapter Organization:

- store/: Adapters for holding user records (in-memory)
- cli/: Command-line interface over the directory
"""
