"""Exception handlers rendering every error as a plain-text body."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError, ResponseValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = structlog.get_logger(__name__)


def format_validation_errors(errors: Sequence[Any]) -> str:
    """Join pydantic error entries into ``loc: msg`` lines."""
    lines = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        lines.append(f"{location}: {message}" if location else message)
    return "\n".join(lines)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    """Malformed JSON, a body of the wrong shape, or a non-integer id."""
    return PlainTextResponse(
        format_validation_errors(exc.errors()),
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def response_validation_handler(
    request: Request, exc: ResponseValidationError
) -> PlainTextResponse:
    """A stored value could not be serialized into the response model."""
    message = format_validation_errors(exc.errors())
    logger.error("response_serialization_failed", path=request.url.path, error=message)
    return PlainTextResponse(
        message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the plain-text handlers on ``app``."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ResponseValidationError, response_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)


__all__ = ["format_validation_errors", "register_exception_handlers"]
