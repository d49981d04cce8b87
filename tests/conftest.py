"""
pytest configuration and fixtures.

The API tests swap the SQL repository for an in-memory store with the same
semantics (color dedup, colors never deleted), so no database is needed.
"""

from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

import main
from core import db
from users import repository


class InMemoryStore:
    """Stand-in for `users.repository` backed by dicts."""

    def __init__(self):
        self.colors: dict[tuple[int, int, int], int] = {}
        self.users: dict[int, tuple[str, int]] = {}
        self._next_color_id = 1
        self._next_user_id = 1

    def _row(self, user_id: int) -> dict[str, Any]:
        name, color_id = self.users[user_id]
        r, g, b = next(triple for triple, cid in self.colors.items() if cid == color_id)
        return {"userid": user_id, "name": name, "r": r, "g": g, "b": b}

    async def list_users(self, pool) -> list[dict[str, Any]]:
        return [self._row(user_id) for user_id in sorted(self.users)]

    async def get_user_by_id(self, pool, user_id: int) -> Optional[dict[str, Any]]:
        if user_id not in self.users:
            return None
        return self._row(user_id)

    async def create_user(self, pool, *, name: str, r: int, g: int, b: int) -> int:
        triple = (r, g, b)
        if triple not in self.colors:
            self.colors[triple] = self._next_color_id
            self._next_color_id += 1
        user_id = self._next_user_id
        self._next_user_id += 1
        self.users[user_id] = (name, self.colors[triple])
        return user_id

    async def delete_user(self, pool, user_id: int) -> bool:
        return self.users.pop(user_id, None) is not None

    async def count_colors(self, pool) -> int:
        return len(self.colors)


class FakePool:
    """Answers the health check query."""

    def __init__(self, ping_value: int = 1):
        self.ping_value = ping_value

    async def fetchval(self, sql: str, *args):
        return self.ping_value


@pytest.fixture
def store(monkeypatch) -> InMemoryStore:
    fake = InMemoryStore()
    for name in ("list_users", "get_user_by_id", "create_user", "delete_user", "count_colors"):
        monkeypatch.setattr(repository, name, getattr(fake, name))
    return fake


@pytest.fixture
def fake_pool() -> FakePool:
    return FakePool()


@pytest.fixture
def app(fake_pool):
    """App without the lifespan; the pool dependency is overridden."""
    application = main.create_app()
    application.dependency_overrides[db.get_pool] = lambda: fake_pool
    return application


@pytest.fixture
def client(app, store) -> TestClient:
    # Not used as a context manager, so the lifespan (real pool) never runs.
    return TestClient(app)


def make_user(name: str = "Ada", r: int = 10, g: int = 20, b: int = 30) -> dict:
    return {"name": name, "color": {"r": r, "g": g, "b": b}}
