"""The data-access interface the API layer depends on."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from users_backend.shared import Deadline, User


@runtime_checkable
class UserStore(Protocol):
    """Persistence operations for users, independent of storage technology.

    Implementations must be safe for concurrent callers and should stop work
    once ``deadline`` has expired. Failures are reported as
    :class:`~users_backend.shared.UserStoreError` subclasses.
    """

    def get_by_id(self, deadline: Deadline, user_id: int) -> User: ...

    def insert(self, deadline: Deadline, user: User) -> User: ...

    def update(self, deadline: Deadline, user: User) -> None: ...

    def delete(self, deadline: Deadline, user_id: int) -> None: ...

    def all(self, deadline: Deadline) -> list[User]: ...
