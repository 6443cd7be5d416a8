"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from quotesync.config import QuotesyncSettings, get_settings
from quotesync.registry import ProviderRegistry
from quotesync.services.sync import SyncService
from quotesync.store.client import AsyncRedisClient
from quotesync.store.records import AuthorRecordStore


async def get_kv_client(request: Request) -> AsyncRedisClient:
    """Get Redis client from app state."""
    return request.app.state.kv_client


async def get_provider_registry(request: Request) -> ProviderRegistry:
    """Get provider registry from app state."""
    return request.app.state.provider_registry


async def get_sync_service(
    registry: ProviderRegistry = Depends(get_provider_registry),
    kv: AsyncRedisClient = Depends(get_kv_client),
    settings: QuotesyncSettings = Depends(get_settings),
) -> SyncService:
    """Get sync service with all dependencies."""
    return SyncService(
        fetcher=registry.fetcher,
        records=AuthorRecordStore(kv),
        images=registry.image_resolver,
        isolate_image_failures=settings.isolate_image_failures,
    )


# Type aliases for cleaner dependency injection
SyncSvc = Annotated[SyncService, Depends(get_sync_service)]
