"""Exceptions raised by user storage backends."""

from __future__ import annotations


class UserStoreError(Exception):
    """Raised when a storage backend fails to complete an operation."""


class UserNotFoundError(UserStoreError):
    """Raised when no user exists for the requested identifier."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"user {user_id} not found")
        self.user_id = user_id


class DeadlineExceededError(UserStoreError):
    """Raised when an operation is attempted after its request deadline."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation}: deadline exceeded")
        self.operation = operation
