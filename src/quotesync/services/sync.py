"""Sync service for orchestrating the fetch → merge → image → store flow."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from quotesync.core.exceptions import ImageError, ProviderUnavailableError
from quotesync.core.models import AuthorInput, AuthorRecord, QuoteDataset, SyncOutcome

if TYPE_CHECKING:
    from quotesync.images.resolver import ImageResolver
    from quotesync.sources.github import GitHubContentFetcher
    from quotesync.store.records import AuthorRecordStore

logger = logging.getLogger(__name__)


class SyncService:
    """
    Service for synchronizing the quotes dataset into the record store.

    Orchestrates the full sync flow:
    1. Fetch the dataset (once per run)
    2. For each author, in dataset order, load the stored record
    3. Merge new quotes without duplicating existing ones
    4. Resolve a portrait when the record has none
    5. Write the record back

    Authors are processed one at a time; each record's read-modify-write
    completes before the next author starts.
    """

    def __init__(
        self,
        fetcher: "GitHubContentFetcher",
        records: "AuthorRecordStore",
        images: "ImageResolver",
        *,
        isolate_image_failures: bool = True,
    ) -> None:
        """
        Initialize the sync service.

        Args:
            fetcher: Source of the quotes dataset
            records: Author record store
            images: Portrait resolver
            isolate_image_failures: If True, an image failure leaves that
                author without an image and the run continues; if False it
                aborts the run
        """
        self._fetcher = fetcher
        self._records = records
        self._images = images
        self._isolate_image_failures = isolate_image_failures

    async def run(self) -> SyncOutcome:
        """
        Fetch the dataset and sync every author.

        Raises:
            FetchError: If the dataset cannot be fetched; nothing is written
        """
        dataset = await self._fetcher.fetch()
        return await self.sync(dataset)

    async def sync(self, dataset: QuoteDataset) -> SyncOutcome:
        """Merge every author of ``dataset`` into the record store."""
        start = time.monotonic()
        outcome = SyncOutcome()

        for author in dataset.authors:
            await self._sync_author(author, outcome)
            outcome.authors_processed += 1

        duration_ms = (time.monotonic() - start) * 1000
        logger.info(
            f"Synced {outcome.authors_processed} authors in {duration_ms:.0f}ms "
            f"({outcome.authors_created} created, {outcome.authors_updated} updated, "
            f"{outcome.quotes_added} quotes added, {outcome.images_resolved} images, "
            f"{outcome.image_failures} image failures)"
        )
        return outcome

    async def _sync_author(self, author: AuthorInput, outcome: SyncOutcome) -> None:
        record = await self._records.get(author.author_id)

        if record is not None:
            added = record.merge_quotes(author.quotes)
            outcome.quotes_added += added

            if record.needs_image:
                image_url = await self._resolve_image(author.author, outcome)
                if image_url:
                    record.image_url = image_url

            await self._records.put(record)
            outcome.authors_updated += 1
            logger.debug(f"Updated author {author.author_id}: {added} new quotes")
        else:
            image_url = await self._resolve_image(author.author, outcome)
            record = AuthorRecord.from_input(author, image_url)

            await self._records.put(record)
            outcome.authors_created += 1
            outcome.quotes_added += len(record.quotes)
            logger.info(f"Created author {author.author_id} ({author.author})")

    async def _resolve_image(self, display_name: str, outcome: SyncOutcome) -> str | None:
        """Resolve a portrait, degrading to None when failures are isolated."""
        try:
            image_url = await self._images.resolve(display_name)
        except (ImageError, ProviderUnavailableError):
            if not self._isolate_image_failures:
                raise
            logger.exception(f"Image resolution failed for {display_name}")
            outcome.image_failures += 1
            return None

        if image_url:
            outcome.images_resolved += 1
        return image_url
