"""
Tests for the token codec and password hashing.
"""

from datetime import timedelta

import pytest

from blogapi.auth.jwt import (
    TokenCodec,
    TokenError,
    TokenExpiredError,
    TokenInvalidError,
)
from blogapi.config import Settings
from blogapi.core.security import hash_password, verify_password
from blogapi.core.utils import utc_now


SECRET = "codec-test-secret-long-enough-for-hs256"


@pytest.fixture
def codec():
    return TokenCodec(SECRET)


class TestTokenCodec:
    def test_issue_and_verify(self, codec):
        token = codec.issue("user_1")
        assert codec.verify(token) == "user_1"

    def test_expiry_is_thirty_days(self, codec):
        now = utc_now().replace(microsecond=0)
        payload = codec.decode(codec.issue("user_1", now=now))

        assert payload.iat == now
        assert payload.exp - payload.iat == timedelta(days=30)
        assert payload.type == "access"
        assert payload.jti.startswith("tok_")

    def test_token_still_valid_on_day_twenty_nine(self, codec):
        token = codec.issue("user_1", now=utc_now() - timedelta(days=29))
        assert codec.verify(token) == "user_1"

    def test_expired_token(self, codec):
        token = codec.issue("user_1", now=utc_now() - timedelta(days=31))
        with pytest.raises(TokenExpiredError):
            codec.verify(token)

    def test_wrong_secret(self, codec):
        token = TokenCodec("a-completely-different-secret-value").issue("user_1")
        with pytest.raises(TokenInvalidError):
            codec.verify(token)

    def test_malformed(self, codec):
        with pytest.raises(TokenInvalidError):
            codec.verify("not.a.token")

    def test_all_failures_share_a_base(self, codec):
        stale = codec.issue("user_1", now=utc_now() - timedelta(days=40))
        for token in (stale, "garbage"):
            with pytest.raises(TokenError):
                codec.verify(token)

    def test_from_settings(self):
        settings = Settings(_env_file=None, jwt_secret_key=SECRET, jwt_expire_days=7)
        codec = TokenCodec.from_settings(settings)

        assert codec.expire_days == 7
        assert codec.expires_in == 7 * 24 * 3600
        assert TokenCodec(SECRET).verify(codec.issue("user_2")) == "user_2"

    def test_empty_secret_is_refused(self):
        with pytest.raises(ValueError):
            TokenCodec("")


class TestPasswords:
    def test_hash_and_verify(self):
        hashed = hash_password("password123")
        assert hashed != "password123"
        assert verify_password("password123", hashed)
        assert not verify_password("password124", hashed)

    def test_salted(self):
        assert hash_password("same") != hash_password("same")

    def test_malformed_hash(self):
        assert not verify_password("x", "no-separator")
        assert not verify_password("x", None)
        assert not verify_password("x", "a:b:c")


class TestSettings:
    def test_production_refuses_dev_secret(self):
        settings = Settings(_env_file=None, environment="production")
        with pytest.raises(RuntimeError):
            settings.check()

    def test_production_with_secret(self):
        Settings(_env_file=None, environment="production", jwt_secret_key=SECRET).check()
