"""The user record exchanged between the API and the storage backends."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class User:
    """A stored user.

    ``id`` stays ``None`` until a backend assigns it on insert.
    """

    id: int | None = None
    name: str = ""
    email: str | None = None
