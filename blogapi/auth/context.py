"""
Auth context - who is making the request.

The auth gate builds one of these and hands it to the route handler,
which passes it on to the services explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass

from blogapi.core.models import UserPublic


@dataclass(frozen=True)
class AuthContext:
    """
    Authenticated caller for a request.

    Usage in routes:
        async def update_post(post_id: str, ctx: AuthContext = Depends(require_user)):
            print(f"User {ctx.user_id} updating {post_id}")
    """

    user: UserPublic

    @property
    def user_id(self) -> str:
        return self.user.id

    def owns(self, author_id: str) -> bool:
        """Is the caller the given author?"""
        return self.user.id == author_id
