"""
The auth gate.

Protected routes declare `ctx: AuthContext = Depends(require_user)`.
The dependency either resolves the bearer token to a user or raises
Unauthenticated, which halts the request with a 401.
"""

from __future__ import annotations

import logging

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from blogapi.auth.context import AuthContext
from blogapi.auth.jwt import TokenCodec
from blogapi.errors import Unauthenticated
from blogapi.integrations.sentry import set_user
from blogapi.services.users import UserService

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

NO_TOKEN = "Not authorized, no token"
TOKEN_FAILED = "Not authorized, token failed"
USER_NOT_FOUND = "User not found"


# Raw header, so the scheme is matched literally rather than case-insensitively
authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


def get_token_codec(request: Request) -> TokenCodec:
    return request.app.state.token_codec


def get_user_service(request: Request) -> UserService:
    return request.app.state.users


def extract_bearer_token(authorization: str | None) -> str | None:
    """
    Pull the token out of an `Authorization: Bearer <token>` header value.

    Returns None when the header is missing or uses another scheme.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None


async def require_user(
    authorization: str | None = Depends(authorization_header),
    codec: TokenCodec = Depends(get_token_codec),
    users: UserService = Depends(get_user_service),
) -> AuthContext:
    """
    Resolve the caller from the bearer token.

    Raises:
        Unauthenticated: no token, a token that fails verification, or a
            token for a user that no longer exists
    """
    token = extract_bearer_token(authorization)
    if token is None:
        raise Unauthenticated(NO_TOKEN)

    try:
        user_id = codec.verify(token)
        user = await users.get(user_id)
    except Exception as e:
        # Expired, forged and malformed tokens all look the same to the caller
        logger.warning(f"Auth failed: {type(e).__name__}: {e}")
        raise Unauthenticated(TOKEN_FAILED) from e

    if user is None:
        logger.warning(f"Auth failed: token for unknown user {user_id}")
        raise Unauthenticated(USER_NOT_FOUND)

    set_user(user.id)
    return AuthContext(user=user.public())
