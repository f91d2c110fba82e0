"""User storage backends and the interface they implement."""

from users_backend.database.repositories.base import UserStore
from users_backend.database.repositories.memory import InMemoryUserRepository
from users_backend.database.repositories.user import UserRepository

__all__ = ["InMemoryUserRepository", "UserRepository", "UserStore"]
