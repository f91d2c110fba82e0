"""In-process user store for development and tests."""

from __future__ import annotations

import threading
from dataclasses import replace

from users_backend.shared import Deadline, User, UserNotFoundError, UserStoreError


class InMemoryUserRepository:
    """Keeps users in a dict guarded by a lock; ids start at 1."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: dict[int, User] = {}
        self._next_id = 1

    def get_by_id(self, deadline: Deadline, user_id: int) -> User:
        deadline.check("get_by_id")
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return replace(user)

    def insert(self, deadline: Deadline, user: User) -> User:
        deadline.check("insert")
        with self._lock:
            stored = replace(user, id=self._next_id)
            self._users[stored.id] = stored
            self._next_id += 1
        return replace(stored)

    def update(self, deadline: Deadline, user: User) -> None:
        deadline.check("update")
        if user.id is None:
            raise UserStoreError("update: user id is not set")
        with self._lock:
            if user.id not in self._users:
                raise UserNotFoundError(user.id)
            self._users[user.id] = replace(user)

    def delete(self, deadline: Deadline, user_id: int) -> None:
        deadline.check("delete")
        with self._lock:
            if self._users.pop(user_id, None) is None:
                raise UserNotFoundError(user_id)

    def all(self, deadline: Deadline) -> list[User]:
        deadline.check("all")
        with self._lock:
            return [replace(user) for _, user in sorted(self._users.items())]
