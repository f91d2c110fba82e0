"""FastAPI dependencies for database access."""

import threading
from functools import cache
from typing import Annotated

from fastapi import Depends

from users_backend.database.service import DatabaseService
from users_backend.settings import BackendSettings, get_settings

SettingsDep = Annotated[BackendSettings, Depends(get_settings)]

_database_lock = threading.Lock()


@cache
def _build_database_service(database_url: str, create_schema: bool) -> DatabaseService:
    """Create a cached :class:`DatabaseService` for the given connection string."""
    service = DatabaseService(database_url)
    if create_schema:
        service.create_schema()
    return service


def get_database(settings: SettingsDep) -> DatabaseService:
    """Return the cached database service instance.

    Requests run on a thread pool, so the first ones may arrive together;
    the lock makes sure only one of them builds the engine.
    """
    with _database_lock:
        return _build_database_service(
            settings.database_url, settings.database_create_schema
        )
