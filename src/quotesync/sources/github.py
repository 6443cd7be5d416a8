"""GitHub repository content fetcher for the quotes dataset."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from pydantic import ValidationError

from quotesync.core.exceptions import FetchError, ProviderUnavailableError
from quotesync.core.models import QuoteDataset
from quotesync.http import AbstractHttpClient

logger = logging.getLogger(__name__)


class GitHubContentFetcher(AbstractHttpClient):
    """
    Fetches the quotes dataset from a GitHub repository file.

    API Documentation: https://docs.github.com/en/rest/repos/contents

    Requests raw content so the body is the JSON document itself rather than
    the base64-wrapped contents object. A token is only needed for private
    repositories.
    """

    SOURCE_NAME: ClassVar[str] = "github"
    BASE_URL: ClassVar[str] = "https://api.github.com"
    RAW_MEDIA_TYPE: ClassVar[str] = "application/vnd.github.v3.raw"

    def __init__(
        self,
        repo: str,
        path: str,
        *,
        token: str | None = None,
        ref: str | None = None,
        base_url: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        super().__init__(base_url=base_url, timeout=timeout)
        self._repo = repo.strip("/")
        self._path = path.lstrip("/")
        self._token = token
        self._ref = ref

    @property
    def content_url(self) -> str:
        """Path of the contents endpoint relative to the API base URL."""
        return f"/repos/{self._repo}/contents/{self._path}"

    def _get_default_headers(self) -> dict[str, str]:
        headers = super()._get_default_headers()
        headers["Accept"] = self.RAW_MEDIA_TYPE
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def fetch(self) -> QuoteDataset:
        """
        Fetch and parse the quotes dataset.

        Returns:
            The parsed dataset

        Raises:
            FetchError: If the source is unreachable, answers with a
                non-success status, or the body is not a valid dataset
        """
        params: dict[str, Any] = {}
        if self._ref:
            params["ref"] = self._ref

        try:
            response = await self._make_request("GET", self.content_url, params=params)
        except ProviderUnavailableError as e:
            raise FetchError(f"Error fetching {self._path}: {e.message}") from e

        if not response.is_success:
            logger.error(f"Error fetching {self._path}: {response.status_code}")
            raise FetchError(
                f"Error fetching {self._path}: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise FetchError(f"{self._path} is not valid JSON: {e}") from e

        try:
            dataset = QuoteDataset.model_validate(payload)
        except ValidationError as e:
            raise FetchError(
                f"{self._path} does not match the quotes dataset shape",
                details={"errors": e.errors(include_url=False)},
            ) from e

        logger.info(f"Fetched {len(dataset.authors)} authors from {self._repo}/{self._path}")
        return dataset
