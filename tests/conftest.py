import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from users_api.api import create_app
from users_api.data.database import Store


@pytest.fixture
def store():
    """Fresh in-memory database per test."""
    s = Store(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    result = s.initialize()
    assert result.ok, result.error
    yield s
    s.dispose()


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as c:
        yield c
