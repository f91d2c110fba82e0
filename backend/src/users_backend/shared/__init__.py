"""Shared models and cross-cutting helpers for the backend."""

from users_backend.shared.deadline import Deadline
from users_backend.shared.errors import (
    DeadlineExceededError,
    UserNotFoundError,
    UserStoreError,
)
from users_backend.shared.user import User

__all__ = [
    "Deadline",
    "DeadlineExceededError",
    "User",
    "UserNotFoundError",
    "UserStoreError",
]
