"""HTTP client service for fetching documentation pages and calling the extractor"""

from typing import Any

import httpx

from apiguide.config import get_settings

BROWSER_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"


class HTTPClient:
    """
    Async HTTP client for documentation sites and the managed extractor.

    Every request opens its own ``httpx.AsyncClient``. Requests are attempted
    once; callers decide what to try next on failure.
    """

    def __init__(
        self,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """
        Initialize HTTP client.

        Args:
            timeout: Request timeout in seconds (default from settings)
            headers: Default headers to include in all requests
        """
        self.settings = get_settings()
        self.timeout = timeout or self.settings.request_timeout
        self.default_headers = headers or {
            "Accept": BROWSER_ACCEPT,
            "Accept-Language": "en-US,en;q=0.5",
        }

    async def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        follow_redirects: bool = True,
    ) -> httpx.Response:
        """
        Make a GET request.

        Args:
            url: URL to request
            headers: Additional headers to include
            params: Query parameters
            follow_redirects: Whether to follow redirects

        Returns:
            httpx.Response object with a 2xx status

        Raises:
            httpx.HTTPStatusError: On a non-2xx response
            httpx.HTTPError: On transport failure
        """
        merged_headers = {**self.default_headers, **(headers or {})}

        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=follow_redirects,
        ) as client:
            response = await client.get(url, headers=merged_headers, params=params)
            response.raise_for_status()
            return response

    async def post(
        self,
        url: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """
        Make a POST request.

        The response is returned whatever its status, since extractor APIs
        report errors such as exhausted credits in a JSON body.

        Args:
            url: URL to request
            json: JSON data to send
            headers: Additional headers

        Returns:
            httpx.Response object

        Raises:
            httpx.HTTPError: On transport failure
        """
        merged_headers = {**self.default_headers, **(headers or {})}

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.post(url, json=json, headers=merged_headers)
