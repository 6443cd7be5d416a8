"""Key-value persistence for author records."""

from .client import AsyncRedisClient
from .keys import RecordKeys
from .records import AuthorRecordStore

__all__ = [
    "AsyncRedisClient",
    "AuthorRecordStore",
    "RecordKeys",
]
