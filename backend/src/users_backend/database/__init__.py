"""Database connectivity helpers and user storage backends."""

from users_backend.database.base import BaseSchema
from users_backend.database.dependencies import get_database
from users_backend.database.repositories import (
    InMemoryUserRepository,
    UserRepository,
    UserStore,
)
from users_backend.database.schemas import UserSchema
from users_backend.database.service import DatabaseService
from users_backend.settings import BackendSettings, get_settings, settings

__all__ = [
    "BaseSchema",
    "BackendSettings",
    "DatabaseService",
    "InMemoryUserRepository",
    "UserRepository",
    "UserSchema",
    "UserStore",
    "get_database",
    "get_settings",
    "settings",
]
