"""
Pytest configuration and shared fixtures.

No live database: `core.db` query helpers are replaced with a recording
fake so tests can assert on the SQL text and the bind arguments.
"""

import os

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")

from typing import Any

import pytest
from fastapi.testclient import TestClient

from auth import security
from core import db


class FakeDB:
    """Returns queued results in order and records every call."""

    def __init__(self):
        self.calls: list[tuple[str, str, tuple]] = []
        self._results: list[Any] = []

    def queue(self, *results: Any) -> None:
        self._results.extend(results)

    def _next(self, kind: str, sql: str, args: tuple, default: Any) -> Any:
        self.calls.append((kind, sql, args))
        if not self._results:
            return default
        result = self._results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    async def fetch_one(self, sql: str, *args: Any):
        return self._next("fetch_one", sql, args, None)

    async def fetch_all(self, sql: str, *args: Any):
        return self._next("fetch_all", sql, args, [])

    async def execute(self, sql: str, *args: Any) -> None:
        self._next("execute", sql, args, None)

    @property
    def last(self) -> tuple[str, str, tuple]:
        return self.calls[-1]


@pytest.fixture
def fake_db(monkeypatch) -> FakeDB:
    fake = FakeDB()
    monkeypatch.setattr(db, "fetch_one", fake.fetch_one)
    monkeypatch.setattr(db, "fetch_all", fake.fetch_all)
    monkeypatch.setattr(db, "execute", fake.execute)
    return fake


@pytest.fixture
def client() -> TestClient:
    # Not used as a context manager, so the lifespan (DB pool) never starts.
    from main import app

    return TestClient(app)


@pytest.fixture
def admin_headers() -> dict:
    token = security.build_access_token(username="admin", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def u1_headers() -> dict:
    token = security.build_access_token(username="u1", is_admin=False)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_company() -> dict:
    return {
        "handle": "c1",
        "name": "C1",
        "description": "Desc1",
        "numEmployees": 1,
        "logoUrl": "http://c1.img",
    }


@pytest.fixture
def sample_job() -> dict:
    return {
        "id": 1,
        "title": "job 1",
        "salary": 50000,
        "equity": "0",
        "companyHandle": "c1",
    }


@pytest.fixture
def sample_user() -> dict:
    return {
        "username": "u1",
        "firstName": "U1F",
        "lastName": "U1L",
        "email": "user1@user.com",
        "isAdmin": False,
    }
