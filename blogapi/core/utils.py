"""
Shared utility functions for the blog service.
"""

from __future__ import annotations

import re
import uuid
from datetime import datetime, timezone


def generate_id(prefix: str = "") -> str:
    """
    Generate a unique ID with optional prefix.

    Args:
        prefix: Optional prefix (e.g., "post", "user")

    Returns:
        A unique ID like "post_a1b2c3d4e5f6"
    """
    uid = uuid.uuid4().hex[:12]
    return f"{prefix}_{uid}" if prefix else uid


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


_NON_SLUG = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """
    Turn a title into a URL slug.

    "Hello, World!" -> "hello-world". Falls back to "post" when nothing
    usable is left.
    """
    slug = _NON_SLUG.sub("-", text.lower()).strip("-")
    return slug or "post"
