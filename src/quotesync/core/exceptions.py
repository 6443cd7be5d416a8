"""Custom exception hierarchy for quotesync."""

from typing import Any


class QuotesyncError(Exception):
    """Base exception for all quotesync errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(QuotesyncError):
    """A component is missing required settings."""

    pass


class FetchError(QuotesyncError):
    """The quotes dataset could not be fetched or parsed."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code


class ProviderUnavailableError(QuotesyncError):
    """External provider could not be reached."""

    def __init__(
        self,
        message: str,
        source: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
        self.status_code = status_code


class ImageError(QuotesyncError):
    """Image resolution failed."""

    pass


class ImageDownloadError(ImageError):
    """The candidate source image could not be downloaded."""

    def __init__(
        self,
        message: str,
        url: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


class UploadError(ImageError):
    """Image hosting provider rejected an upload."""

    def __init__(
        self,
        message: str,
        errors: Any = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.errors = errors
        self.status_code = status_code


class StoreError(QuotesyncError):
    """Key-value store operation failed or returned an unreadable record."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.key = key
