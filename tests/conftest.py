"""
Shared fixtures: a fresh app with in-memory storage per test.
"""

import pytest
from fastapi.testclient import TestClient

from blogapi.api import create_app
from blogapi.config import Settings
from blogapi.storage import create_local_storage


TEST_SECRET = "test-secret-key-with-enough-bytes-for-hs256"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        environment="test",
        jwt_secret_key=TEST_SECRET,
        storage_backend="memory",
        sentry_dsn="",
    )


@pytest.fixture
def app(settings):
    return create_app(settings, storage=create_local_storage("memory"))


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


def register(client, username, email, password="password123"):
    """Register a user through the API; returns (token, user)."""
    res = client.post(
        "/api/auth/register",
        json={"username": username, "email": email, "password": password},
    )
    assert res.status_code == 201, res.text
    body = res.json()
    return body["token"], body["user"]


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def author(client):
    """A registered user: (token, user)."""
    return register(client, "testuser", "test@example.com")


@pytest.fixture
def other_user(client):
    return register(client, "other", "other@example.com")


@pytest.fixture
def post(client, author):
    """A post owned by `author`."""
    token, _ = author
    res = client.post(
        "/api/posts",
        headers=bearer(token),
        json={
            "title": "Test Post",
            "content": "This is a test post content",
            "category": "cat_general",
        },
    )
    assert res.status_code == 201, res.text
    return res.json()
