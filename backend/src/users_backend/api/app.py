"""Factory for constructing the FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI

from users_backend.api.errors import register_exception_handlers
from users_backend.api.middleware import RequestLoggingMiddleware, RequestTimeoutMiddleware
from users_backend.api.routers import users_router
from users_backend.log import configure_logging
from users_backend.settings import BackendSettings, get_settings


def create_api(settings: BackendSettings | None = None) -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    config = settings or get_settings()
    configure_logging(level=config.log_level, use_json=config.log_json)

    app = FastAPI(title="Users API")
    # added last runs first: logging wraps the timeout so 504s are logged
    app.add_middleware(
        RequestTimeoutMiddleware, timeout_seconds=config.request_timeout_seconds
    )
    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)
    app.include_router(users_router)
    return app
