"""
Authentication - bearer tokens resolved to an explicit AuthContext.

Route handlers never read identity from ambient state: protected routes
take `ctx: AuthContext = Depends(require_user)` and pass it along.
"""

from blogapi.auth.context import AuthContext
from blogapi.auth.jwt import (
    TokenCodec,
    TokenPayload,
    TokenError,
    TokenExpiredError,
    TokenInvalidError,
)
from blogapi.core.security import hash_password, verify_password
from blogapi.auth.policies import require_user, extract_bearer_token

__all__ = [
    "AuthContext",
    "TokenCodec",
    "TokenPayload",
    "TokenError",
    "TokenExpiredError",
    "TokenInvalidError",
    "hash_password",
    "verify_password",
    "require_user",
    "extract_bearer_token",
]
