"""Provider registry for creating and managing external clients."""

from __future__ import annotations

from typing import TYPE_CHECKING

from quotesync.core.exceptions import ConfigurationError
from quotesync.images.resolver import ImageResolver
from quotesync.images.search import GoogleImageSearchClient
from quotesync.images.store import CloudflareImageStore
from quotesync.sources.github import GitHubContentFetcher

if TYPE_CHECKING:
    from quotesync.config import QuotesyncSettings


class ProviderRegistry:
    """
    Factory for the provider clients used by a sync run.

    Credentials are taken from settings and handed to each client's
    constructor; clients own their HTTP connections until ``close_all``.
    """

    def __init__(
        self,
        fetcher: GitHubContentFetcher,
        search_client: GoogleImageSearchClient,
        image_store: CloudflareImageStore,
    ) -> None:
        self.fetcher = fetcher
        self.search_client = search_client
        self.image_store = image_store
        self.image_resolver = ImageResolver(search_client, image_store)

    @classmethod
    def from_settings(cls, settings: "QuotesyncSettings") -> "ProviderRegistry":
        """
        Create a registry with clients configured from settings.

        Raises:
            ConfigurationError: If image provider credentials are missing
        """
        missing = [
            name
            for name in (
                "cloudflare_account_id",
                "cloudflare_images_api_token",
                "google_api_key",
                "custom_search_engine_id",
            )
            if not getattr(settings, name)
        ]
        if missing:
            raise ConfigurationError(
                f"Missing settings: {', '.join(missing)}",
                details={"missing": missing},
            )

        return cls(
            fetcher=GitHubContentFetcher(
                settings.content_repo,
                settings.content_path,
                token=settings.github_token,
                ref=settings.content_ref,
                timeout=settings.http_timeout,
            ),
            search_client=GoogleImageSearchClient(
                settings.google_api_key,
                settings.custom_search_engine_id,
                timeout=settings.http_timeout,
            ),
            image_store=CloudflareImageStore(
                settings.cloudflare_account_id,
                settings.cloudflare_images_api_token,
                timeout=settings.http_timeout,
            ),
        )

    async def close_all(self) -> None:
        """Close all provider clients."""
        await self.fetcher.close()
        await self.image_resolver.close()
