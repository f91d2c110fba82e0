from __future__ import annotations

import time

import structlog
from fastapi.testclient import TestClient
from structlog.testing import capture_logs

from users_backend.api import create_api
from users_backend.api.dependencies import get_user_store
from users_backend.database import InMemoryUserRepository
from users_backend.settings import BackendSettings
from users_backend.shared import Deadline, User


class SlowUserRepository(InMemoryUserRepository):
    """Store whose listing outlives a short request deadline."""

    def __init__(self, delay: float) -> None:
        super().__init__()
        self._delay = delay
        self.seen_deadline: Deadline | None = None

    def all(self, deadline: Deadline) -> list[User]:
        self.seen_deadline = deadline
        time.sleep(self._delay)
        return super().all(deadline)


def _client_for(store: InMemoryUserRepository, *, timeout: float) -> TestClient:
    app = create_api(BackendSettings(request_timeout_seconds=timeout))
    app.dependency_overrides[get_user_store] = lambda: store
    return TestClient(app)


def test_request_exceeding_deadline_returns_504() -> None:
    store = SlowUserRepository(delay=0.5)

    with _client_for(store, timeout=0.05) as client:
        response = client.get("/users")

    assert response.status_code == 504
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "request timed out"
    assert store.seen_deadline is not None
    assert store.seen_deadline.expired


def test_request_within_deadline_passes_through() -> None:
    store = SlowUserRepository(delay=0.0)

    with _client_for(store, timeout=5.0) as client:
        response = client.get("/users")

    assert response.status_code == 200
    assert response.json() == []
    assert store.seen_deadline is not None
    assert not store.seen_deadline.expired


def test_every_request_is_logged() -> None:
    store = InMemoryUserRepository()

    with _client_for(store, timeout=5.0) as client:
        with capture_logs() as logs:
            client.post("/users", json={"name": "Alice"})
            client.get("/users/abc")

    completed = [log for log in logs if log["event"] == "http_request_completed"]
    assert [(log["method"], log["path"], log["status_code"]) for log in completed] == [
        ("POST", "/users", 201),
        ("GET", "/users/abc", 400),
    ]
    assert all(log["duration_ms"] >= 0 for log in completed)


def test_timed_out_request_is_logged_with_504() -> None:
    store = SlowUserRepository(delay=0.3)

    with _client_for(store, timeout=0.05) as client:
        with capture_logs() as logs:
            client.get("/users")

    events = {log["event"]: log for log in logs}
    assert events["http_request_timed_out"]["log_level"] == "warning"
    assert events["http_request_completed"]["status_code"] == 504


def test_store_failures_are_logged() -> None:
    store = InMemoryUserRepository()

    with _client_for(store, timeout=5.0) as client:
        with capture_logs() as logs:
            client.delete("/users/3")

    failures = [log for log in logs if log["event"] == "user_store_failed"]
    assert failures == [
        {
            "event": "user_store_failed",
            "log_level": "error",
            "operation": "delete",
            "error": "user 3 not found",
        }
    ]


def test_configure_logging_accepts_json_renderer() -> None:
    create_api(BackendSettings(log_json=True, log_level="debug"))

    assert isinstance(
        structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer
    )
