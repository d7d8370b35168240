"""
Post access control.

All create/read/update/delete rules for posts live here:

- create needs title, content and category, and stamps the caller as author
- list and get are public and come back with the author populated
- update and delete are allowed for the post's author only

Every operation catches its own store faults and reports them as
InternalError.
"""

from __future__ import annotations

import logging

from blogapi.auth.context import AuthContext
from blogapi.core.models import Post, PostCreate, PostResponse, PostUpdate
from blogapi.core.utils import utc_now
from blogapi.errors import Forbidden, NotFound, ValidationError
from blogapi.services.base import store_faults
from blogapi.services.users import UserService
from blogapi.storage import Collections, StorageProvider

logger = logging.getLogger(__name__)

POST_NOT_FOUND = "Post not found"


class PostService:
    """Enforces who may do what to posts."""

    def __init__(self, storage: StorageProvider, users: UserService):
        self.storage = storage
        self.users = users

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------

    async def _load(self, post_id: str) -> Post:
        doc = await self.storage.metadata.get(Collections.POSTS, post_id)
        if doc is None:
            raise NotFound(POST_NOT_FOUND)
        return Post.model_validate(doc)

    async def _load_owned(self, post_id: str, ctx: AuthContext) -> Post:
        post = await self._load(post_id)
        if not ctx.owns(post.author):
            logger.warning(f"User {ctx.user_id} denied access to post {post_id}")
            raise Forbidden("Forbidden")
        return post

    async def _populate(self, posts: list[Post]) -> list[PostResponse]:
        authors = await self.users.authors({post.author for post in posts})
        return [PostResponse.build(post, authors.get(post.author)) for post in posts]

    async def _save(self, post: Post) -> None:
        await self.storage.metadata.save(
            Collections.POSTS, post.id, post.model_dump(mode="json")
        )

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    async def create(self, data: PostCreate, ctx: AuthContext) -> PostResponse:
        """
        Create a post owned by the caller.

        Raises:
            ValidationError: title, content or category missing or empty
        """
        if not data.title or not data.content or not data.category:
            raise ValidationError("All fields are required")

        now = utc_now()
        with store_faults("Create post"):
            post = Post(
                title=data.title,
                content=data.content,
                category=data.category,
                author=ctx.user_id,
                created_at=now,
                updated_at=now,
            )
            await self._save(post)
            [response] = await self._populate([post])

        logger.info(f"User {ctx.user_id} created post {post.id}")
        return response

    async def list_posts(
        self,
        category: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> list[PostResponse]:
        """
        List posts, optionally filtered by exact category.

        Returns at most `limit` posts, skipping the first (page-1)*limit.
        """
        filters = {"category": category} if category else None
        with store_faults("List posts"):
            docs = await self.storage.metadata.query(
                Collections.POSTS,
                filters,
                limit=limit,
                offset=(page - 1) * limit,
            )
            return await self._populate([Post.model_validate(doc) for doc in docs])

    async def get(self, post_id: str) -> PostResponse:
        """Get a post by ID."""
        with store_faults("Get post"):
            post = await self._load(post_id)
            [response] = await self._populate([post])
        return response

    async def update(self, post_id: str, changes: PostUpdate, ctx: AuthContext) -> PostResponse:
        """
        Apply the provided fields to a post the caller owns.

        Fields left out, null or empty keep their stored value.

        Raises:
            NotFound: no such post
            Forbidden: the caller is not the author
        """
        with store_faults("Update post"):
            post = await self._load_owned(post_id, ctx)

            updates = changes.changes()
            if updates:
                post = post.model_copy(update={**updates, "updated_at": utc_now()})
                await self._save(post)

            [response] = await self._populate([post])

        logger.info(f"User {ctx.user_id} updated post {post_id}: {sorted(updates)}")
        return response

    async def delete(self, post_id: str, ctx: AuthContext) -> str:
        """
        Delete a post the caller owns.

        Raises:
            NotFound: no such post
            Forbidden: the caller is not the author
        """
        with store_faults("Delete post"):
            await self._load_owned(post_id, ctx)
            if not await self.storage.metadata.delete(Collections.POSTS, post_id):
                raise NotFound(POST_NOT_FOUND)

        logger.info(f"User {ctx.user_id} deleted post {post_id}")
        return "Post deleted"
