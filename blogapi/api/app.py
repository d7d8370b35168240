"""
FastAPI application for the blog service.

`create_app` wires settings, storage and services together. uvicorn
serves it in factory mode (see blogapi.main).
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blogapi.api.error_handlers import register_error_handlers
from blogapi.api.posts import router as posts_router
from blogapi.auth.jwt import TokenCodec
from blogapi.auth.routes import router as auth_router
from blogapi.config import Settings, get_settings
from blogapi.integrations.sentry import init_sentry
from blogapi.observability import setup_logging
from blogapi.services import PostService, UserService
from blogapi.storage import StorageProvider, create_local_storage

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    storage: StorageProvider | None = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration; defaults to the environment-loaded settings
        storage: Storage backends; defaults to the one named in settings
    """
    settings = settings or get_settings()
    settings.check()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize and cleanup app resources."""
        setup_logging(settings.log_level)
        init_sentry(settings)
        logger.info(
            f"Blog API starting in {settings.environment} mode "
            f"({settings.storage_backend} storage)"
        )
        yield
        logger.info("Blog API shutting down")

    app = FastAPI(
        title="Blog API",
        description="Blog posts with JWT-authenticated, author-only mutation",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Everything handlers need hangs off app.state; nothing is module-global
    app.state.settings = settings
    app.state.storage = storage or create_local_storage(
        settings.storage_backend, settings.data_dir
    )
    app.state.token_codec = TokenCodec.from_settings(settings)
    app.state.users = UserService(app.state.storage)
    app.state.posts = PostService(app.state.storage, app.state.users)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(posts_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "blog-api"}

    return app
