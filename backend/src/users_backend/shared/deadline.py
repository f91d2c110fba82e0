"""Per-request deadlines shared by the middleware and storage calls."""

from __future__ import annotations

import time
from collections.abc import Callable

from users_backend.shared.errors import DeadlineExceededError

Clock = Callable[[], float]


class Deadline:
    """A point on a monotonic clock after which work must stop.

    Backends receive the deadline of the request they serve and call
    :meth:`check` around store access; cancellation is cooperative.
    """

    __slots__ = ("_clock", "_expires_at")

    def __init__(self, expires_at: float, *, clock: Clock = time.monotonic) -> None:
        self._expires_at = expires_at
        self._clock = clock

    @classmethod
    def after(cls, seconds: float, *, clock: Clock = time.monotonic) -> Deadline:
        """Return a deadline ``seconds`` from now."""
        return cls(clock() + seconds, clock=clock)

    def remaining(self) -> float:
        """Seconds left before expiry, never negative."""
        return max(0.0, self._expires_at - self._clock())

    @property
    def expired(self) -> bool:
        return self._clock() >= self._expires_at

    def check(self, operation: str) -> None:
        """Raise :class:`DeadlineExceededError` if the deadline has passed."""
        if self.expired:
            raise DeadlineExceededError(operation)

    def __repr__(self) -> str:
        return f"Deadline(remaining={self.remaining():.3f})"
