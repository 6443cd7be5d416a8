"""Google Custom Search image lookup."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from quotesync.core.exceptions import ProviderUnavailableError
from quotesync.http import AbstractHttpClient

logger = logging.getLogger(__name__)


class GoogleImageSearchClient(AbstractHttpClient):
    """
    Finds a candidate portrait image for a person.

    API Documentation: https://developers.google.com/custom-search/v1/reference/rest/v1/cse/list

    Provider errors and empty result sets are both reported as "no image";
    errors are only distinguished in the logs.
    """

    SOURCE_NAME: ClassVar[str] = "google_custom_search"
    BASE_URL: ClassVar[str] = "https://www.googleapis.com"
    SEARCH_PATH: ClassVar[str] = "/customsearch/v1"
    QUERY_SUFFIX: ClassVar[str] = "portrait headshot"

    def __init__(
        self,
        api_key: str,
        engine_id: str,
        *,
        base_url: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        super().__init__(base_url=base_url, timeout=timeout)
        self._api_key = api_key
        self._engine_id = engine_id

    def build_params(self, query: str) -> dict[str, Any]:
        """Query parameters asking for one large JPEG photo."""
        return {
            "q": f"{query} {self.QUERY_SUFFIX}",
            "searchType": "image",
            "imgType": "photo",
            "imgSize": "large",
            "fileType": "jpg",
            "num": 1,
            "key": self._api_key,
            "cx": self._engine_id,
        }

    async def search(self, query: str) -> str | None:
        """
        Search for a portrait of ``query``.

        Returns:
            Link of the first image result, or None if nothing usable was found
        """
        try:
            response = await self._make_request(
                "GET",
                self.SEARCH_PATH,
                params=self.build_params(query),
            )
        except ProviderUnavailableError as e:
            logger.warning(f"Image search unavailable for {query!r}: {e.message}")
            return None

        if not response.is_success:
            logger.warning(f"Image search for {query!r} failed: {response.status_code}")
            return None

        try:
            data = response.json()
        except ValueError:
            logger.warning(f"Image search for {query!r} returned a non-JSON body")
            return None

        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list) or not items or not isinstance(items[0], dict):
            logger.debug(f"No image results for {query!r}")
            return None

        link = items[0].get("link")
        if not isinstance(link, str) or not link:
            logger.debug(f"First image result for {query!r} has no link")
            return None
        return link
