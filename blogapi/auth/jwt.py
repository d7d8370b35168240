# =============================================================================
# JWT Authentication Implementation
# =============================================================================
#
# This module provides token creation and validation (TokenCodec).
#
# The codec is built once from settings at startup and lives on app.state;
# nothing here reads a process-wide secret.
#
# =============================================================================

from __future__ import annotations

from datetime import datetime, timedelta, timezone
import logging

from pydantic import BaseModel
import jwt

from blogapi.config import Settings
from blogapi.core.utils import generate_id, utc_now

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"


# =============================================================================
# Models
# =============================================================================


class TokenPayload(BaseModel):
    """JWT token payload."""
    sub: str  # user_id
    exp: datetime
    iat: datetime
    type: str
    jti: str  # unique token ID


# =============================================================================
# Errors
# =============================================================================


class TokenError(Exception):
    """Base exception for token errors."""
    pass


class TokenExpiredError(TokenError):
    """Token has expired."""
    pass


class TokenInvalidError(TokenError):
    """Token is invalid or malformed."""
    pass


# =============================================================================
# Token Codec
# =============================================================================


class TokenCodec:
    """
    Issues and verifies signed, time-limited identity tokens.

    Usage:
        codec = TokenCodec.from_settings(settings)
        token = codec.issue(user.id)
        user_id = codec.verify(token)  # raises TokenError
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_days: int = 30):
        if not secret_key:
            raise ValueError("A signing secret is required")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expire_days = expire_days

    @classmethod
    def from_settings(cls, settings: Settings) -> TokenCodec:
        return cls(
            secret_key=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            expire_days=settings.jwt_expire_days,
        )

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds."""
        return int(timedelta(days=self.expire_days).total_seconds())

    def issue(self, user_id: str, now: datetime | None = None) -> str:
        """Create a signed access token for a user."""
        now = now or utc_now()
        payload = {
            "sub": user_id,
            "iat": now,
            "exp": now + timedelta(days=self.expire_days),
            "type": ACCESS_TOKEN_TYPE,
            "jti": generate_id("tok"),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> TokenPayload:
        """
        Decode and validate a token.

        Raises:
            TokenExpiredError: Token has expired
            TokenInvalidError: Token is malformed, badly signed or of the wrong type
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise TokenExpiredError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise TokenInvalidError(f"Invalid token: {e}")

        if payload.get("type") != ACCESS_TOKEN_TYPE:
            raise TokenInvalidError(f"Expected {ACCESS_TOKEN_TYPE} token, got {payload.get('type')}")

        return TokenPayload(
            sub=payload["sub"],
            exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            iat=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            type=payload["type"],
            jti=payload.get("jti", ""),
        )

    def verify(self, token: str) -> str:
        """Return the user id a valid token was issued for."""
        return self.decode(token).sub

