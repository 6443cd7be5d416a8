"""Shared base for provider clients with HTTP client management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, ClassVar

import httpx

from quotesync.core.exceptions import ProviderUnavailableError

logger = logging.getLogger(__name__)


class AbstractHttpClient:
    """
    Base class for all provider clients.

    Provides:
    - A lazily created ``httpx.AsyncClient`` bound to the provider base URL
    - Default headers, with a hook for subclasses to add auth
    - Translation of transport errors into ProviderUnavailableError
    """

    # Class-level configuration (to be overridden by subclasses)
    SOURCE_NAME: ClassVar[str]
    BASE_URL: ClassVar[str]

    def __init__(self, *, base_url: str | None = None, timeout: float = 30.0) -> None:
        self._base_url = base_url or self.BASE_URL
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def source_name(self) -> str:
        return self.SOURCE_NAME

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=httpx.Timeout(self._timeout),
                headers=self._get_default_headers(),
                follow_redirects=True,
            )

        try:
            yield self._client
        except httpx.HTTPError as e:
            raise ProviderUnavailableError(
                message=f"HTTP error: {e}",
                source=self.source_name,
            ) from e

    def _get_default_headers(self) -> dict[str, str]:
        """Get default headers for requests. Override to add auth."""
        return {
            "User-Agent": "quotesync/1.0",
            "Accept": "application/json",
        }

    async def _make_request(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Make an HTTP request against the provider."""
        async with self._get_client() as client:
            response = await client.request(method, url, **kwargs)

        logger.debug(
            f"{self.source_name} {method} {response.request.url.path} -> {response.status_code}"
        )
        return response

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AbstractHttpClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
