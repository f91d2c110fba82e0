"""Request timeout and access logging middleware."""

from __future__ import annotations

import time
from typing import Awaitable, Callable

import anyio
import structlog
from starlette import status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp

from users_backend.shared import Deadline

logger = structlog.get_logger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]


class RequestTimeoutMiddleware(BaseHTTPMiddleware):
    """Bound each request by a wall-clock deadline.

    The deadline is stored on ``request.state`` so storage calls can stop
    on their own. When it elapses the client gets ``504`` while a handler
    still running in the thread pool finishes in the background and its
    response is dropped.
    """

    def __init__(self, app: ASGIApp, *, timeout_seconds: float) -> None:
        super().__init__(app)
        self._timeout_seconds = timeout_seconds

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        request.state.deadline = Deadline.after(self._timeout_seconds)
        response: Response | None = None
        with anyio.move_on_after(self._timeout_seconds):
            response = await call_next(request)
        if response is None:
            logger.warning(
                "http_request_timed_out",
                method=request.method,
                path=request.url.path,
                timeout_seconds=self._timeout_seconds,
            )
            return PlainTextResponse(
                "request timed out", status_code=status.HTTP_504_GATEWAY_TIMEOUT
            )
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency for every request."""

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "http_request_failed",
                method=request.method,
                path=request.url.path,
                duration_ms=_elapsed_ms(started),
                error=str(exc),
            )
            raise
        logger.info(
            "http_request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=_elapsed_ms(started),
        )
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


__all__ = ["RequestLoggingMiddleware", "RequestTimeoutMiddleware"]
