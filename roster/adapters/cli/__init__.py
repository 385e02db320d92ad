"""Command-line interface adapters.

Provides CLI commands for working with the user directory:
- create: Register a new user
- get: Show a user by id
- deactivate: Deactivate a non-admin user
- list: List users, optionally by status
- report: Print the user report
- clear: Remove every user
"""
