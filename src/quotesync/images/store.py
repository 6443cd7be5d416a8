"""Cloudflare Images storage for author portraits."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

import httpx

from quotesync.core.exceptions import ImageDownloadError, ProviderUnavailableError, UploadError
from quotesync.core.identifiers import derive_image_id
from quotesync.http import AbstractHttpClient

logger = logging.getLogger(__name__)


class CloudflareImageStore(AbstractHttpClient):
    """
    Checks for and uploads images in Cloudflare Images.

    API Documentation: https://developers.cloudflare.com/api/resources/images/

    Images are addressed by a custom ID, so the derived author identifier
    doubles as the upload dedup key. Both lookups and uploads answer with
    ``result.variants``; the first variant is used as the delivery URL.
    """

    SOURCE_NAME: ClassVar[str] = "cloudflare_images"
    BASE_URL: ClassVar[str] = "https://api.cloudflare.com/client/v4"
    DEFAULT_CONTENT_TYPE: ClassVar[str] = "image/jpeg"

    def __init__(
        self,
        account_id: str,
        api_token: str,
        *,
        base_url: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        super().__init__(base_url=base_url, timeout=timeout)
        self._account_id = account_id
        self._api_token = api_token

    @property
    def images_path(self) -> str:
        return f"/accounts/{self._account_id}/images/v1"

    def _get_default_headers(self) -> dict[str, str]:
        headers = super()._get_default_headers()
        headers["Authorization"] = f"Bearer {self._api_token}"
        return headers

    async def exists(self, image_id: str) -> str | None:
        """
        Look up an image by ID.

        Any non-success answer is treated as "not found".

        Returns:
            Delivery URL of the existing image, or None
        """
        response = await self._make_request("GET", f"{self.images_path}/{image_id}")
        if not response.is_success:
            logger.debug(f"Image {image_id} not found ({response.status_code})")
            return None

        try:
            return self._first_variant(response.json())
        except (ValueError, LookupError, TypeError):
            logger.warning(f"Unexpected lookup payload for image {image_id}")
            return None

    async def upload(self, source_url: str, display_name: str) -> str:
        """
        Copy an image from ``source_url`` into the store.

        Args:
            source_url: Public URL of the candidate image
            display_name: Author name; determines the image ID and filename

        Returns:
            Delivery URL of the uploaded image

        Raises:
            ImageDownloadError: If the source image cannot be downloaded
            UploadError: If the provider rejects the upload
        """
        content, content_type = await self.download(source_url)
        image_id = derive_image_id(display_name)

        response = await self._make_request(
            "POST",
            self.images_path,
            files={"file": (f"{display_name}.jpg", content, content_type)},
            data={"id": image_id},
        )

        try:
            payload: Any = response.json()
        except ValueError:
            payload = None

        if not response.is_success:
            errors = payload.get("errors") if isinstance(payload, dict) else response.text
            raise UploadError(
                f"Upload of {image_id} failed: {response.status_code}",
                errors=errors,
                status_code=response.status_code,
            )

        try:
            url = self._first_variant(payload)
        except (LookupError, TypeError) as e:
            raise UploadError(
                f"Upload of {image_id} returned no delivery variant",
                errors=payload,
                status_code=response.status_code,
            ) from e

        logger.info(f"Uploaded image {image_id} for {display_name}")
        return url

    async def download(self, url: str) -> tuple[bytes, str]:
        """
        Download an image without the provider credentials.

        Returns:
            Tuple of (content, content_type)
        """
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
            ) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            raise ProviderUnavailableError(
                message=f"HTTP error downloading {url}: {e}",
                source="image_source",
            ) from e

        if not response.is_success:
            raise ImageDownloadError(
                f"Download of {url} failed: {response.status_code}",
                url=url,
                status_code=response.status_code,
            )

        content_type = response.headers.get("Content-Type", self.DEFAULT_CONTENT_TYPE)
        return response.content, content_type.split(";")[0].strip()

    @staticmethod
    def _first_variant(payload: Any) -> str:
        return payload["result"]["variants"][0]
