"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from quotesync.api.routes import health_router, sync_router
from quotesync.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Handles startup and shutdown of resources.
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    # Initialize provider clients (validates credentials before any connection is opened)
    from quotesync.registry import ProviderRegistry

    logger.info("Initializing provider registry...")
    app.state.provider_registry = ProviderRegistry.from_settings(settings)

    # Initialize Redis record store
    from quotesync.store.client import AsyncRedisClient

    logger.info("Initializing Redis store...")
    app.state.kv_client = AsyncRedisClient(str(settings.redis_url))
    await app.state.kv_client.connect()

    logger.info("Application startup complete")

    yield

    # Cleanup
    logger.info("Shutting down application...")

    if hasattr(app.state, "provider_registry"):
        await app.state.provider_registry.close_all()

    if hasattr(app.state, "kv_client") and app.state.kv_client:
        await app.state.kv_client.close()

    logger.info("Application shutdown complete")


def create_app(
    *,
    title: str = "Quotesync API",
    description: str = "Syncs the quotes dataset and author portraits into Redis",
    version: str = "0.1.0",
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs
        version: API version

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=title,
        description=description,
        version=version,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Register routes
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(sync_router, prefix="/api/v1")

    return app


# For uvicorn direct execution
app = create_app()
