"""Relational user repository backed by SQLAlchemy."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from users_backend.database.schemas import UserSchema
from users_backend.database.service import DatabaseService
from users_backend.shared import Deadline, User, UserNotFoundError, UserStoreError

logger = structlog.get_logger(__name__)


class UserRepository:
    """Encapsulates persistence operations for :class:`UserSchema`.

    Every call runs in its own transaction, so one repository can serve
    concurrent requests. The deadline is checked before the session opens
    and again before commit; an expired deadline rolls the transaction back.
    """

    def __init__(self, database: DatabaseService) -> None:
        self._database = database

    @contextmanager
    def _transaction(self, deadline: Deadline, operation: str) -> Iterator[Session]:
        deadline.check(operation)
        try:
            with self._database.session() as session:
                yield session
                deadline.check(operation)
        except SQLAlchemyError as exc:
            logger.error("user_repository_query_failed", operation=operation, error=str(exc))
            raise UserStoreError(f"{operation}: {exc}") from exc

    def _get_row(self, session: Session, user_id: int) -> UserSchema:
        row = session.get(UserSchema, user_id)
        if row is None:
            raise UserNotFoundError(user_id)
        return row

    def get_by_id(self, deadline: Deadline, user_id: int) -> User:
        """Return the user stored under ``user_id``."""
        with self._transaction(deadline, "get_by_id") as session:
            user = self._get_row(session, user_id).to_user()
        return user

    def insert(self, deadline: Deadline, user: User) -> User:
        """Add a new user; the database assigns its id."""
        with self._transaction(deadline, "insert") as session:
            row = UserSchema(name=user.name, email=user.email)
            session.add(row)
            session.flush()
            session.refresh(row)
            stored = row.to_user()
        return stored

    def update(self, deadline: Deadline, user: User) -> None:
        """Replace every field of the user stored under ``user.id``."""
        if user.id is None:
            raise UserStoreError("update: user id is not set")
        with self._transaction(deadline, "update") as session:
            row = self._get_row(session, user.id)
            row.name = user.name
            row.email = user.email

    def delete(self, deadline: Deadline, user_id: int) -> None:
        """Remove the user stored under ``user_id``."""
        with self._transaction(deadline, "delete") as session:
            session.delete(self._get_row(session, user_id))

    def all(self, deadline: Deadline) -> list[User]:
        """Return every stored user ordered by id."""
        with self._transaction(deadline, "all") as session:
            rows = session.scalars(select(UserSchema).order_by(UserSchema.id))
            users = [row.to_user() for row in rows]
        return users
