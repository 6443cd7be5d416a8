"""Service layer for orchestrating business logic."""

from quotesync.services.sync import SyncService

__all__ = [
    "SyncService",
]
