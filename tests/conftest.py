"""Shared fixtures for the todo API tests."""

from contextlib import asynccontextmanager
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from todo_api import db
from todo_api.main import create_app
from todo_api.settings import Settings


class FakePool:
    """Stands in for an asyncpg pool and counts acquire/release pairs."""

    def __init__(self, conn: Any) -> None:
        self.conn = conn
        self.acquired = 0
        self.released = 0

    @asynccontextmanager
    async def acquire(self):
        self.acquired += 1
        try:
            yield self.conn
        finally:
            self.released += 1


@pytest.fixture(autouse=True)
def no_database_pool(monkeypatch: pytest.MonkeyPatch) -> None:
    """Every test starts on the document store unless it installs a pool."""
    monkeypatch.setattr(db, "_pool", None)


@pytest.fixture
def make_client() -> Callable[..., TestClient]:
    """Build a client for an app with the given setting overrides."""

    def factory(**overrides: Any) -> TestClient:
        settings = Settings(database_url=None, **overrides)
        return TestClient(create_app(settings), raise_server_exceptions=False)

    return factory


@pytest.fixture
def client(make_client: Callable[..., TestClient]) -> TestClient:
    """Provide a TestClient over a fresh, empty document store."""
    return make_client()


@pytest.fixture
def install_pool(monkeypatch: pytest.MonkeyPatch) -> Callable[[Any], FakePool]:
    """Switch the app to the Postgres store backed by a fake pool."""

    def install(conn: Any) -> FakePool:
        pool = FakePool(conn)
        monkeypatch.setattr(db, "_pool", pool)
        return pool

    return install
