"""Core domain models, identifiers, and exceptions."""

from .exceptions import (
    ConfigurationError,
    FetchError,
    ImageDownloadError,
    ImageError,
    ProviderUnavailableError,
    QuotesyncError,
    StoreError,
    UploadError,
)
from .identifiers import derive_image_id
from .models import AuthorInput, AuthorRecord, QuoteDataset, SyncOutcome

__all__ = [
    # Models
    "AuthorInput",
    "AuthorRecord",
    "QuoteDataset",
    "SyncOutcome",
    # Identifiers
    "derive_image_id",
    # Exceptions
    "ConfigurationError",
    "FetchError",
    "ImageDownloadError",
    "ImageError",
    "ProviderUnavailableError",
    "QuotesyncError",
    "StoreError",
    "UploadError",
]
