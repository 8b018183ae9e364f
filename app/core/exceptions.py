"""
Custom Exceptions

This module defines custom exceptions for the forum service layer.

- DependencyNotFoundError: a service asked the container for a name that
  resolves to no registered model, service or library
- NotFoundError: a record lookup by id came back empty
- DatabaseError: a query failed inside a model
"""

from typing import Any, Optional


class ForumException(Exception):
    """Base exception for the forum service layer."""
    pass


class DependencyNotFoundError(ForumException, LookupError):
    """Raised when a name cannot be resolved from the container."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Dependency '{name}' not found in container")


class NotFoundError(ForumException):
    """Raised when a record is not found in the database."""

    def __init__(self, entity: str, record_id: Any):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} '{record_id}' not found")


class DatabaseError(ForumException):
    """Raised when database operations fail."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.original_error = original_error
        super().__init__(f"Database error: {message}")
