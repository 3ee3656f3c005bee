"""Scrapin enrichment API client for LinkedIn profiles."""

from __future__ import annotations

import re
from typing import Any

import httpx
import structlog
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from resume_ingest_core.exceptions import InvalidUploadError, ProfileFetchError

logger = structlog.get_logger()

LINKEDIN_PROFILE_PATTERN = re.compile(
    r"^https?://([a-z]{2,3}\.)?linkedin\.com/in/[^/?#]+/?", re.IGNORECASE
)


def _is_transient(error: BaseException) -> bool:
    """Retry transport errors and 5xx / 429 responses, nothing else."""
    if isinstance(error, httpx.TransportError):
        return True
    if isinstance(error, httpx.HTTPStatusError):
        status = error.response.status_code
        return status == 429 or status >= 500
    return False


class ScrapinClient:
    """Fetch a LinkedIn profile payload from the Scrapin enrichment API."""

    def __init__(self, api_key: str, base_url: str, timeout: float = 30.0) -> None:
        """Initialize with credentials and endpoint."""
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout

    @staticmethod
    def validate_url(linkedin_url: str) -> str:
        """Return the URL if it points at a LinkedIn profile.

        Raises:
            InvalidUploadError: If it does not.
        """
        url = linkedin_url.strip()
        if not LINKEDIN_PROFILE_PATTERN.match(url):
            msg = f"Not a LinkedIn profile URL: {linkedin_url}"
            raise InvalidUploadError(msg)
        return url

    async def fetch_profile(self, linkedin_url: str) -> dict[str, Any]:
        """Fetch the enrichment payload for a profile URL.

        Raises:
            InvalidUploadError: If the URL is not a LinkedIn profile URL.
            ProfileFetchError: If the API is unreachable or rejects the request.
        """
        url = self.validate_url(linkedin_url)
        try:
            payload = await self._get(url)
        except (httpx.HTTPError, ValueError) as e:
            logger.error("profile_fetch_failed", url=url, error=str(e))
            msg = f"Profile API request failed: {e}"
            raise ProfileFetchError(msg) from e

        if not isinstance(payload, dict) or not isinstance(payload.get("person"), dict):
            msg = "Profile API returned no person for this URL"
            raise ProfileFetchError(msg)

        logger.info("profile_fetched", url=url)
        return payload

    @retry(
        retry=retry_if_exception(_is_transient),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def _get(self, linkedin_url: str) -> Any:
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(
                self._base_url,
                params={"apikey": self._api_key, "linkedinUrl": linkedin_url},
            )
            response.raise_for_status()
            return response.json()
