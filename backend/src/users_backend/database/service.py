"""Database session management utilities."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from users_backend.database.base import BaseSchema
from users_backend.settings import BackendSettings, get_settings


def _engine_options(url: str) -> dict[str, Any]:
    """Return engine options required for the URL's dialect."""
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return {}
    options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if parsed.database in (None, "", ":memory:"):
        # a single shared connection keeps the in-memory database alive
        options["poolclass"] = StaticPool
    return options


class DatabaseService:
    """Wraps SQLAlchemy engine and session factory."""

    def __init__(
        self,
        url: str | None = None,
        *,
        settings: BackendSettings | None = None,
        **engine_options: Any,
    ) -> None:
        config = settings or get_settings()
        database_url = url or config.database_url
        options = _engine_options(database_url) | engine_options
        self._engine = create_engine(database_url, future=True, **options)
        self._session_factory = sessionmaker(
            bind=self._engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
            class_=Session,
        )

    @property
    def engine(self) -> Engine:
        """Expose the SQLAlchemy engine."""

        return self._engine

    def create_schema(self) -> None:
        """Create missing tables for every registered schema."""

        BaseSchema.metadata.create_all(self._engine)

    def dispose(self) -> None:
        """Close pooled connections."""

        self._engine.dispose()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Provide a transactional session scope."""

        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
