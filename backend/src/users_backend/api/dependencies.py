"""Dependency providers for FastAPI routers."""

from __future__ import annotations

import threading
from functools import cache
from typing import Annotated

from fastapi import Depends, Path, Request
from fastapi.exceptions import RequestValidationError

from users_backend.database import (
    InMemoryUserRepository,
    UserRepository,
    UserStore,
    get_database,
)
from users_backend.database.dependencies import SettingsDep
from users_backend.shared import Deadline

# optional sign followed by ASCII digits only, as strconv.Atoi accepts
USER_ID_PATTERN = r"^[+-]?[0-9]+$"
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_memory_store_lock = threading.Lock()


@cache
def _memory_store() -> InMemoryUserRepository:
    """Return the process-wide in-memory store."""

    return InMemoryUserRepository()


def get_user_store(settings: SettingsDep) -> UserStore:
    """Return the storage backend selected by ``STORAGE_BACKEND``."""

    if settings.storage_backend == "memory":
        with _memory_store_lock:
            return _memory_store()
    return UserRepository(get_database(settings))


def get_user_id(
    user_id: Annotated[str, Path(pattern=USER_ID_PATTERN)],
) -> int:
    """Parse the ``{user_id}`` path segment as a signed 64-bit integer.

    Decimals, underscores, whitespace and out-of-range values are rejected
    with the same 400 as any other malformed request.
    """

    digits = user_id.lstrip("+-").lstrip("0")
    if len(digits) <= 19:
        value = int(user_id)
        if INT64_MIN <= value <= INT64_MAX:
            return value
    raise RequestValidationError(
        [
            {
                "type": "int64_range",
                "loc": ("path", "user_id"),
                "msg": "Value out of range for a 64-bit integer",
                "input": user_id,
            }
        ]
    )


def get_deadline(request: Request, settings: SettingsDep) -> Deadline:
    """Return the deadline attached by the timeout middleware.

    Requests that bypass the middleware get a fresh deadline.
    """

    deadline = getattr(request.state, "deadline", None)
    if deadline is None:
        deadline = Deadline.after(settings.request_timeout_seconds)
    return deadline


UserStoreDep = Annotated[UserStore, Depends(get_user_store)]
UserIdDep = Annotated[int, Depends(get_user_id)]
DeadlineDep = Annotated[Deadline, Depends(get_deadline)]

__all__ = [
    "DeadlineDep",
    "SettingsDep",
    "UserIdDep",
    "UserStoreDep",
    "get_deadline",
    "get_user_id",
    "get_user_store",
]
