# =============================================================================
# Post API Routes
# =============================================================================
#
# Endpoints:
#   GET    /api/posts       - List posts (public, ?category=&page=&limit=)
#   POST   /api/posts       - Create post (auth)
#   GET    /api/posts/{id}  - Get post (public)
#   PUT    /api/posts/{id}  - Update post (author only)
#   DELETE /api/posts/{id}  - Delete post (author only)
#
# =============================================================================

from fastapi import APIRouter, Depends, Query, Request

from blogapi.auth import AuthContext, require_user
from blogapi.config import Settings
from blogapi.core.models import (
    MessageResponse,
    PostCreate,
    PostResponse,
    PostUpdate,
)
from blogapi.services.posts import PostService

router = APIRouter(prefix="/api/posts", tags=["posts"])


def get_post_service(request: Request) -> PostService:
    return request.app.state.posts


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


# =============================================================================
# Public Endpoints
# =============================================================================

@router.get("", response_model=list[PostResponse])
async def list_posts(
    category: str | None = None,
    page: int = Query(1),
    limit: int | None = Query(None),
    posts: PostService = Depends(get_post_service),
    settings: Settings = Depends(get_app_settings),
):
    """
    List posts, optionally filtered by category.

    Out-of-range paging values are clamped: page to at least 1, limit to
    1..max_page_size.
    """
    if limit is None:
        limit = settings.default_page_size
    page = max(page, 1)
    limit = min(max(limit, 1), settings.max_page_size)
    return await posts.list_posts(category=category, page=page, limit=limit)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    posts: PostService = Depends(get_post_service),
):
    """Get a post by ID."""
    return await posts.get(post_id)


# =============================================================================
# Protected Endpoints
# =============================================================================

@router.post("", response_model=PostResponse, status_code=201)
async def create_post(
    data: PostCreate | None = None,
    ctx: AuthContext = Depends(require_user),
    posts: PostService = Depends(get_post_service),
):
    """
    Create a post authored by the caller.

    A missing body is treated as an empty one, so it fails the
    required-fields check like any other incomplete post.
    """
    return await posts.create(data or PostCreate(), ctx)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: str,
    data: PostUpdate | None = None,
    ctx: AuthContext = Depends(require_user),
    posts: PostService = Depends(get_post_service),
):
    """
    Update a post. Only its author may do this.

    No body means no changes; existence and ownership are still checked.
    """
    return await posts.update(post_id, data or PostUpdate(), ctx)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    ctx: AuthContext = Depends(require_user),
    posts: PostService = Depends(get_post_service),
):
    """Delete a post. Only its author may do this."""
    message = await posts.delete(post_id, ctx)
    return MessageResponse(message=message)
