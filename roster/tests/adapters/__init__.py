"""Tests for adapter implementations.

These tests exercise the in-memory store and the CLI command handler
against the core domain models.
"""
