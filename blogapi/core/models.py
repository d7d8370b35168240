"""
Core data models for the blog service.

Users own posts; a post's author is fixed at creation time from the
authenticated caller and never taken from the request body.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from blogapi.core.utils import generate_id, slugify, utc_now


# =============================================================================
# Users
# =============================================================================


class User(BaseModel):
    """User as stored in the document store."""

    id: str = Field(default_factory=lambda: generate_id("user"))
    username: str
    email: str
    password_hash: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def public(self) -> UserPublic:
        """The user record with the password hash stripped."""
        return UserPublic(
            id=self.id,
            username=self.username,
            email=self.email,
            created_at=self.created_at,
        )


class UserPublic(BaseModel):
    """User data returned to clients (no sensitive fields)."""

    id: str
    username: str
    email: str
    created_at: datetime


class AuthorSummary(BaseModel):
    """The author fields joined into post responses."""

    id: str
    username: str
    email: str


# =============================================================================
# Posts
# =============================================================================


class Post(BaseModel):
    """
    A blog post.

    `author` holds the owning user's id. It is assigned once by
    PostService.create and nothing writes it afterwards.
    """

    id: str = Field(default_factory=lambda: generate_id("post"))
    title: str
    content: str
    category: str
    author: str
    slug: str = ""
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def model_post_init(self, __context) -> None:
        if not self.slug:
            self.slug = slugify(self.title)


class PostCreate(BaseModel):
    """
    Body of POST /api/posts.

    Fields are optional here so a missing field is reported by the
    service as a 400 rather than by request validation.
    """

    title: str | None = None
    content: str | None = None
    category: str | None = None


class PostUpdate(BaseModel):
    """
    Body of PUT /api/posts/{id}.

    Each field is independently optional. A field that is absent, null or
    blank leaves the stored value as it is.
    """

    title: str | None = None
    content: str | None = None
    category: str | None = None

    def changes(self) -> dict[str, str]:
        """Fields that were sent with a usable value."""
        provided = self.model_dump(exclude_unset=True)
        return {key: value for key, value in provided.items() if value}


class PostResponse(BaseModel):
    """A post with its author populated."""

    id: str
    title: str
    content: str
    category: str
    author: AuthorSummary | None
    slug: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def build(cls, post: Post, author: AuthorSummary | None) -> PostResponse:
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            category=post.category,
            author=author,
            slug=post.slug,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class MessageResponse(BaseModel):
    message: str
