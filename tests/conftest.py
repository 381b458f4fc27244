"""Pytest configuration and fixtures."""

import os

# Point the app at a local SQLite file before settings are first read
os.environ["DATABASE_URL"] = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import delete  # noqa: E402

from account_service.config import get_settings  # noqa: E402
from account_service.context import AppContext  # noqa: E402
from account_service.main import app  # noqa: E402
from account_service.models.user import User  # noqa: E402

get_settings.cache_clear()


def clear_users(context: AppContext) -> None:
    """Remove every row from the user table."""
    with context.engine.begin() as conn:
        conn.execute(delete(User))


@pytest.fixture(scope="function")
def client():
    """Create a test client; startup runs the real connectivity check and schema setup."""
    with TestClient(app) as test_client:
        context = app.state.context
        clear_users(context)
        try:
            yield test_client
        finally:
            clear_users(context)


@pytest.fixture(scope="function")
def context():
    """A started application context outside of any HTTP app."""
    ctx = AppContext.create(get_settings())
    ctx.start()
    clear_users(ctx)
    yield ctx
    clear_users(ctx)
    ctx.close()


@pytest.fixture
def registered_user(client):
    """Register a user and return its credentials with the new id."""
    credentials = {"name": "testuser", "password": "testpass123"}
    response = client.post("/register", json={**credentials, "email": "test@example.com"})
    assert response.status_code == 201
    return {**credentials, "id": response.json()["id"]}
