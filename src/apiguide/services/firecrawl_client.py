"""Client for the Firecrawl single-page scrape API (managed extractor)"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from apiguide.config import get_settings
from apiguide.exceptions import ExtractorError, InsufficientCreditsError
from apiguide.services.http_client import HTTPClient

logger = logging.getLogger(__name__)

PAYMENT_REQUIRED = 402


@dataclass(frozen=True)
class ScrapeResult:
    """Markdown rendering of one page"""

    markdown: str
    title: str | None = None


class FirecrawlClient:
    """
    Renders a URL to markdown server-side via Firecrawl.

    One request per call, no polling and no retries. Any failure is raised as
    an ``ExtractorError`` so callers can fall back to another strategy.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        http_client: HTTPClient | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("Firecrawl API key is required")
        self.api_key = api_key
        self.base_url = (base_url or get_settings().firecrawl_api_base).rstrip("/")
        self.http_client = http_client or HTTPClient()

    async def scrape_markdown(self, url: str) -> ScrapeResult:
        """
        Scrape a single page as markdown.

        Args:
            url: Page to render

        Returns:
            ScrapeResult with the markdown (possibly empty) and page title

        Raises:
            InsufficientCreditsError: If the account is out of credits
            ExtractorError: On transport errors or an error response
        """
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {"url": url, "formats": ["markdown"]}

        try:
            response = await self.http_client.post(
                f"{self.base_url}/v1/scrape", json=payload, headers=headers
            )
        except httpx.HTTPError as e:
            raise ExtractorError("Firecrawl request failed", str(e)) from e

        body = _json_body(response)

        if response.status_code == PAYMENT_REQUIRED:
            raise InsufficientCreditsError(
                "Firecrawl credits exhausted", body.get("error") or response.text[:200]
            )
        if not response.is_success or body.get("success") is False:
            raise ExtractorError(
                f"Firecrawl returned an error (HTTP {response.status_code})",
                body.get("error") or "Failed to scrape URL",
            )

        return _parse_scrape_body(body)


def _json_body(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _parse_scrape_body(body: dict[str, Any]) -> ScrapeResult:
    # v1 nests the document under "data"; older shapes put it at the top level
    data = body.get("data") if isinstance(body.get("data"), dict) else {}
    markdown = data.get("markdown") or body.get("markdown") or body.get("content") or ""

    metadata = data.get("metadata") or body.get("metadata") or {}
    title = metadata.get("title") if isinstance(metadata, dict) else None

    return ScrapeResult(markdown=str(markdown), title=title or None)
