"""Quotesync - Sync a quotes dataset and author portraits into a key-value store."""

from quotesync.client import QuotesyncClient, sync
from quotesync.core.models import AuthorInput, AuthorRecord, QuoteDataset, SyncOutcome
from quotesync.services.sync import SyncService

__version__ = "0.1.0"
__all__ = [
    # Client
    "QuotesyncClient",
    "sync",
    # Services
    "SyncService",
    # Models
    "AuthorInput",
    "AuthorRecord",
    "QuoteDataset",
    "SyncOutcome",
    # Version
    "__version__",
]
