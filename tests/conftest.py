import os

# Keep the app's module-level engine off the real database.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from homes_api import sql
from homes_api.deps import get_conn
from homes_api.main import app

HOME = {
    "area": "50",
    "floor": "2",
    "rooms": "3",
    "price": "100000",
    "currency": "USD",
}


def _memory_engine():
    # one shared connection so every request thread sees the same database
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def engine():
    eng = _memory_engine()
    sql.prepare(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def client(engine):
    def _get_conn():
        conn = engine.connect()
        try:
            yield conn
        finally:
            conn.close()

    app.dependency_overrides[get_conn] = _get_conn
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def unprovisioned_client():
    eng = _memory_engine()

    def _get_conn():
        conn = eng.connect()
        try:
            yield conn
        finally:
            conn.close()

    app.dependency_overrides[get_conn] = _get_conn
    yield TestClient(app)
    app.dependency_overrides.clear()
    eng.dispose()


@pytest.fixture
def home(client):
    return client.post("/homes", json=HOME).json()


@pytest.fixture
def payload():
    return dict(HOME)
