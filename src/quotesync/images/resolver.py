"""Image resolution: search, dedup against the image store, upload."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from quotesync.core.identifiers import derive_image_id

if TYPE_CHECKING:
    from quotesync.images.search import GoogleImageSearchClient
    from quotesync.images.store import CloudflareImageStore

logger = logging.getLogger(__name__)


class ImageResolver:
    """
    Resolves a hosted portrait URL for an author name.

    The derived image ID is the only cache: if the store already holds an
    image under it, that image is reused and nothing is uploaded.
    """

    def __init__(
        self,
        search_client: "GoogleImageSearchClient",
        image_store: "CloudflareImageStore",
    ) -> None:
        self._search = search_client
        self._store = image_store

    async def resolve(self, display_name: str) -> str | None:
        """
        Resolve a delivery URL for ``display_name``.

        Returns:
            Delivery URL, or None when the search finds no candidate image

        Raises:
            ImageError: If downloading or uploading the candidate fails
            ProviderUnavailableError: If a provider cannot be reached
        """
        source_url = await self._search.search(display_name)
        if not source_url:
            logger.info(f"No image found for {display_name}")
            return None

        image_id = derive_image_id(display_name)
        existing = await self._store.exists(image_id)
        if existing:
            logger.debug(f"Reusing stored image {image_id}")
            return existing

        return await self._store.upload(source_url, display_name)

    async def close(self) -> None:
        await self._search.close()
        await self._store.close()
