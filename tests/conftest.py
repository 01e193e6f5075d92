"""Shared fixtures.

The test suite runs against an in-memory SQLite database. ``DATABASE_URL``
must be set before any ``starter_api`` module reads the settings.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel  # noqa: E402

from starter_api.db.init_db import init_db  # noqa: E402
from starter_api.db.session import build_engine, get_db  # noqa: E402
from starter_api.main import app  # noqa: E402
from starter_api.services.user_service import UserService  # noqa: E402


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    init_db(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def service(session):
    return UserService(session)


@pytest.fixture
def client(engine):
    """TestClient whose requests hit the in-memory database."""

    def _get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
