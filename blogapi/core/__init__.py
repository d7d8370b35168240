"""
Core module - data models and shared utilities.
"""

from blogapi.core.models import (
    User,
    UserPublic,
    AuthorSummary,
    Post,
    PostCreate,
    PostUpdate,
    PostResponse,
    MessageResponse,
)
from blogapi.core.utils import generate_id, utc_now, slugify

__all__ = [
    "User",
    "UserPublic",
    "AuthorSummary",
    "Post",
    "PostCreate",
    "PostUpdate",
    "PostResponse",
    "MessageResponse",
    "generate_id",
    "utc_now",
    "slugify",
]
