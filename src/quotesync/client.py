"""Main library client for standalone usage."""

from __future__ import annotations

import logging

from quotesync.config import QuotesyncSettings
from quotesync.core.models import SyncOutcome
from quotesync.registry import ProviderRegistry
from quotesync.services.sync import SyncService
from quotesync.store.client import AsyncRedisClient
from quotesync.store.records import AuthorRecordStore

logger = logging.getLogger(__name__)


class QuotesyncClient:
    """
    Main client for the quotesync library.

    Runs a sync without the web server, e.g. from a scheduled job.

    Usage:
        async with QuotesyncClient() as client:
            outcome = await client.sync()

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(self, settings: QuotesyncSettings | None = None) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
        """
        self._settings = settings or QuotesyncSettings()
        self._registry: ProviderRegistry | None = None
        self._kv: AsyncRedisClient | None = None

    async def __aenter__(self) -> QuotesyncClient:
        """Initialize resources on context entry."""
        await self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    async def _initialize(self) -> None:
        """Initialize client resources."""
        self._registry = ProviderRegistry.from_settings(self._settings)

        self._kv = AsyncRedisClient(str(self._settings.redis_url))
        await self._kv.connect()
        logger.info("Redis store initialized")

    async def close(self) -> None:
        """Close all resources."""
        if self._registry:
            await self._registry.close_all()
            self._registry = None

        if self._kv:
            await self._kv.close()
            self._kv = None

    def _ensure_initialized(self) -> None:
        """Ensure client is initialized."""
        if self._registry is None or self._kv is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with QuotesyncClient() as client:'"
            )

    def build_service(self) -> SyncService:
        """Build a sync service bound to this client's resources."""
        self._ensure_initialized()
        return SyncService(
            fetcher=self._registry.fetcher,
            records=AuthorRecordStore(self._kv),
            images=self._registry.image_resolver,
            isolate_image_failures=self._settings.isolate_image_failures,
        )

    async def sync(self) -> SyncOutcome:
        """
        Fetch the quotes dataset and sync all authors.

        Raises:
            FetchError: If the dataset cannot be fetched
        """
        return await self.build_service().run()


async def sync(*, settings: QuotesyncSettings | None = None) -> SyncOutcome:
    """Run a single sync (convenience function)."""
    async with QuotesyncClient(settings) as client:
        return await client.sync()
