import os
from collections import deque

os.environ.setdefault("JOBLY_ENV", "test")
os.environ.setdefault("SECRET_KEY", "secret-test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from jobly.database import get_db  # noqa: E402
from jobly.main import app  # noqa: E402
from jobly.session import create_token  # noqa: E402


class FakeDB:
    """
    Stands in for an asyncpg pool. Records every statement and hands back
    scripted results in order (rows default to [] / None when none are queued).
    """

    def __init__(self):
        self.calls = []
        self._results = deque()

    def will_return(self, *results):
        self._results.extend(results)
        return self

    def _next(self, default):
        result = self._results.popleft() if self._results else default
        if isinstance(result, Exception):
            raise result
        return result

    async def fetch(self, sql, *args):
        self.calls.append((sql, args))
        return self._next([])

    async def fetchrow(self, sql, *args):
        self.calls.append((sql, args))
        return self._next(None)

    @property
    def last_sql(self):
        return self.calls[-1][0]

    @property
    def last_args(self):
        return self.calls[-1][1]


@pytest.fixture
def db():
    return FakeDB()


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def u1_token():
    return create_token({"username": "u1", "isAdmin": False})


@pytest.fixture
def admin_token():
    return create_token({"username": "admin", "isAdmin": True})


def bearer(token):
    return {"Authorization": f"Bearer {token}"}
