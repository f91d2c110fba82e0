"""API layer: application factory, routers, middleware and error handlers."""

from users_backend.api.app import create_api

__all__ = ["create_api"]
