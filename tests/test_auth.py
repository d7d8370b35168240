"""
Tests for the auth gate and the account endpoints.
"""

import jwt
import pytest

from blogapi.auth import extract_bearer_token
from conftest import bearer, register


# =============================================================================
# Header parsing
# =============================================================================


class TestExtractBearerToken:
    def test_bearer_token(self):
        assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    @pytest.mark.parametrize("value", [None, "", "Bearer", "Bearer ", "Token abc", "bearer abc", "abc"])
    def test_rejects_other_forms(self, value):
        assert extract_bearer_token(value) is None


# =============================================================================
# Gate
# =============================================================================


class TestAuthGate:
    def test_valid_token_resolves_user(self, client, author):
        token, user = author
        res = client.get("/api/auth/me", headers=bearer(token))

        assert res.status_code == 200
        body = res.json()
        assert body["id"] == user["id"]
        assert "password_hash" not in body
        assert "password" not in body

    def test_missing_header(self, client):
        res = client.get("/api/auth/me")
        assert res.status_code == 401
        assert res.json() == {"message": "Not authorized, no token"}

    def test_wrong_scheme(self, client, author):
        token, _ = author
        res = client.get("/api/auth/me", headers={"Authorization": f"Token {token}"})
        assert res.status_code == 401
        assert res.json() == {"message": "Not authorized, no token"}

    def test_garbage_token(self, client):
        res = client.get("/api/auth/me", headers=bearer("not-a-jwt"))
        assert res.status_code == 401
        assert res.json() == {"message": "Not authorized, token failed"}

    def test_token_signed_with_another_secret(self, client, author):
        _, user = author
        forged = jwt.encode(
            {"sub": user["id"], "iat": 0, "exp": 2**31, "type": "access"},
            "someone-elses-secret-that-is-long-enough",
            algorithm="HS256",
        )
        res = client.get("/api/auth/me", headers=bearer(forged))
        assert res.status_code == 401
        assert res.json() == {"message": "Not authorized, token failed"}

    def test_token_for_unknown_user(self, client, app):
        token = app.state.token_codec.issue("user_ghost")
        res = client.get("/api/auth/me", headers=bearer(token))
        assert res.status_code == 401
        assert res.json() == {"message": "User not found"}

    def test_store_fault_during_lookup_is_token_failure(self, client, app, author, monkeypatch):
        token, _ = author

        async def broken_get(user_id):
            raise RuntimeError("connection reset")

        monkeypatch.setattr(app.state.users, "get", broken_get)
        res = client.get("/api/auth/me", headers=bearer(token))
        assert res.status_code == 401
        assert res.json() == {"message": "Not authorized, token failed"}


# =============================================================================
# Accounts
# =============================================================================


class TestAccounts:
    def test_register_returns_working_token(self, client):
        token, user = register(client, "alice", "Alice@Example.com")

        assert user["email"] == "alice@example.com"
        me = client.get("/api/auth/me", headers=bearer(token)).json()
        assert me["id"] == user["id"]

    def test_duplicate_email(self, client, author):
        res = client.post(
            "/api/auth/register",
            json={"username": "again", "email": "TEST@example.com", "password": "password123"},
        )
        assert res.status_code == 400
        assert res.json() == {"message": "Email already registered"}

    def test_short_password(self, client):
        res = client.post(
            "/api/auth/register",
            json={"username": "bob", "email": "bob@example.com", "password": "short"},
        )
        assert res.status_code == 400
        assert "password" in res.json()["message"]

    def test_login(self, client, author):
        res = client.post(
            "/api/auth/login",
            json={"email": "test@example.com", "password": "password123"},
        )
        assert res.status_code == 200
        body = res.json()
        assert body["token_type"] == "bearer"
        assert body["expires_in"] == 30 * 24 * 3600
        assert client.get("/api/auth/me", headers=bearer(body["token"])).status_code == 200

    def test_login_wrong_password(self, client, author):
        res = client.post(
            "/api/auth/login",
            json={"email": "test@example.com", "password": "wrong-password"},
        )
        assert res.status_code == 401
        assert res.json() == {"message": "Invalid email or password"}

    def test_login_unknown_email(self, client):
        res = client.post(
            "/api/auth/login",
            json={"email": "nobody@example.com", "password": "password123"},
        )
        assert res.status_code == 401


class TestHealth:
    def test_health(self, client):
        res = client.get("/health")
        assert res.status_code == 200
        assert res.json()["status"] == "healthy"
