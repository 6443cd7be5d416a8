"""Author record persistence on top of the key-value store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from quotesync.core.exceptions import StoreError
from quotesync.core.models import AuthorRecord
from quotesync.store.keys import RecordKeys

if TYPE_CHECKING:
    from quotesync.store.client import AsyncRedisClient

logger = logging.getLogger(__name__)


class AuthorRecordStore:
    """
    Reads and writes AuthorRecord values as JSON strings.

    This is the only place stored JSON is parsed; a record that cannot be
    decoded surfaces as StoreError.
    """

    def __init__(self, kv: "AsyncRedisClient") -> None:
        self._kv = kv

    async def get(self, author_id: int | str) -> AuthorRecord | None:
        """Load the record for ``author_id``, or None if it does not exist yet."""
        key = RecordKeys.author(author_id)
        raw = await self._kv.get(key)
        if raw is None:
            return None

        try:
            return AuthorRecord.model_validate_json(raw)
        except ValidationError as e:
            raise StoreError(
                f"Stored record {key} is not a valid author record",
                key=key,
                details={"errors": e.errors(include_url=False)},
            ) from e

    async def put(self, record: AuthorRecord) -> None:
        """Write ``record``, replacing any previous value."""
        key = RecordKeys.author(record.author_id)
        await self._kv.set(key, record.model_dump_json())
        logger.debug(f"Stored {key} ({len(record.quotes)} quotes)")
