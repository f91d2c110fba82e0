"""Relational backend tests against an in-memory SQLite database."""

from __future__ import annotations

from itertools import chain, repeat
from typing import TYPE_CHECKING

import pytest

from users_backend.database import BaseSchema, DatabaseService, UserRepository
from users_backend.shared import (
    Deadline,
    DeadlineExceededError,
    User,
    UserNotFoundError,
    UserStoreError,
)

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def database() -> Iterator[DatabaseService]:
    service = DatabaseService("sqlite://")
    service.create_schema()
    yield service
    service.dispose()


@pytest.fixture
def repository(database: DatabaseService) -> UserRepository:
    return UserRepository(database)


@pytest.fixture
def deadline() -> Deadline:
    return Deadline.after(60)


def test_insert_assigns_increasing_ids(
    repository: UserRepository, deadline: Deadline
) -> None:
    first = repository.insert(deadline, User(name="Alice"))
    second = repository.insert(deadline, User(id=99, name="Bob"))

    assert first == User(id=1, name="Alice")
    assert second == User(id=2, name="Bob")


def test_get_by_id_returns_stored_user(
    repository: UserRepository, deadline: Deadline
) -> None:
    stored = repository.insert(deadline, User(name="Alice", email="a@example.com"))

    assert repository.get_by_id(deadline, stored.id) == stored


def test_get_by_id_missing_raises_not_found(
    repository: UserRepository, deadline: Deadline
) -> None:
    with pytest.raises(UserNotFoundError, match="user 5 not found"):
        repository.get_by_id(deadline, 5)


def test_update_replaces_every_field(
    repository: UserRepository, deadline: Deadline
) -> None:
    stored = repository.insert(deadline, User(name="Alice", email="a@example.com"))

    repository.update(deadline, User(id=stored.id, name="Alicia"))

    assert repository.get_by_id(deadline, stored.id) == User(id=stored.id, name="Alicia")


def test_update_missing_user_raises_not_found(
    repository: UserRepository, deadline: Deadline
) -> None:
    with pytest.raises(UserNotFoundError):
        repository.update(deadline, User(id=8, name="Ghost"))


def test_update_without_id_is_rejected(
    repository: UserRepository, deadline: Deadline
) -> None:
    with pytest.raises(UserStoreError):
        repository.update(deadline, User(name="Nobody"))


def test_delete_removes_user(repository: UserRepository, deadline: Deadline) -> None:
    stored = repository.insert(deadline, User(name="Alice"))

    repository.delete(deadline, stored.id)

    with pytest.raises(UserNotFoundError):
        repository.get_by_id(deadline, stored.id)
    with pytest.raises(UserNotFoundError):
        repository.delete(deadline, stored.id)


def test_all_returns_users_ordered_by_id(
    repository: UserRepository, deadline: Deadline
) -> None:
    assert repository.all(deadline) == []

    repository.insert(deadline, User(name="Alice"))
    repository.insert(deadline, User(name="Bob"))

    assert [user.name for user in repository.all(deadline)] == ["Alice", "Bob"]


def test_expired_deadline_skips_the_store(repository: UserRepository) -> None:
    expired = Deadline.after(0)

    with pytest.raises(DeadlineExceededError):
        repository.insert(expired, User(name="Alice"))

    assert repository.all(Deadline.after(60)) == []


def test_deadline_passing_mid_transaction_rolls_back(
    repository: UserRepository,
) -> None:
    # first reading is before the session opens, the rest after the insert
    clock = chain([0.0], repeat(100.0)).__next__
    deadline = Deadline(10.0, clock=clock)

    with pytest.raises(DeadlineExceededError, match="insert"):
        repository.insert(deadline, User(name="Alice"))

    assert repository.all(Deadline.after(60)) == []


def test_database_errors_are_wrapped(
    database: DatabaseService, repository: UserRepository, deadline: Deadline
) -> None:
    BaseSchema.metadata.drop_all(database.engine)

    with pytest.raises(UserStoreError, match="^all: "):
        repository.all(deadline)
