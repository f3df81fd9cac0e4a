"""Tests for HTTP client service"""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from apiguide.services import HTTPClient


@pytest.fixture
def http_client() -> HTTPClient:
    """Create HTTP client for testing"""
    return HTTPClient(timeout=5)


@pytest.fixture
def mock_async_client():
    """Patch httpx.AsyncClient; yields (client class mock, client mock)"""
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client.__aenter__.return_value = mock_client
        mock_client_class.return_value = mock_client
        yield mock_client_class, mock_client


class TestHTTPClientInitialization:
    """Tests for HTTPClient initialization"""

    def test_creates_client_with_defaults(self) -> None:
        """Test client creation with default settings"""
        client = HTTPClient()
        assert client.timeout == 30.0
        assert "Accept" in client.default_headers
        assert "Accept-Language" in client.default_headers

    def test_creates_client_with_custom_timeout(self) -> None:
        client = HTTPClient(timeout=10)
        assert client.timeout == 10

    def test_timeout_from_settings(self, monkeypatch) -> None:
        from apiguide.config import get_settings

        monkeypatch.setenv("REQUEST_TIMEOUT", "12.5")
        get_settings.cache_clear()
        assert HTTPClient().timeout == 12.5

    def test_creates_client_with_custom_headers(self) -> None:
        client = HTTPClient(headers={"X-Custom-Header": "test"})
        assert client.default_headers == {"X-Custom-Header": "test"}


class TestHTTPClientGet:
    """Tests for GET requests"""

    @pytest.mark.asyncio
    async def test_get_successful_request(self, http_client: HTTPClient, mock_async_client) -> None:
        _, mock_client = mock_async_client
        mock_response = MagicMock(spec=httpx.Response)
        mock_response.status_code = 200
        mock_response.raise_for_status = MagicMock()
        mock_client.get = AsyncMock(return_value=mock_response)

        response = await http_client.get("https://example.com")

        assert response.status_code == 200
        mock_response.raise_for_status.assert_called_once()

    @pytest.mark.asyncio
    async def test_get_merges_headers(self, http_client: HTTPClient, mock_async_client) -> None:
        """Per-request headers override defaults without dropping them"""
        _, mock_client = mock_async_client
        mock_response = MagicMock(spec=httpx.Response)
        mock_response.raise_for_status = MagicMock()
        mock_client.get = AsyncMock(return_value=mock_response)

        await http_client.get("https://example.com", headers={"User-Agent": "curl/8.0.0"})

        sent_headers = mock_client.get.call_args.kwargs["headers"]
        assert sent_headers["User-Agent"] == "curl/8.0.0"
        assert "Accept" in sent_headers

    @pytest.mark.asyncio
    async def test_get_follows_redirects(self, http_client: HTTPClient, mock_async_client) -> None:
        mock_client_class, mock_client = mock_async_client
        mock_response = MagicMock(spec=httpx.Response)
        mock_response.raise_for_status = MagicMock()
        mock_client.get = AsyncMock(return_value=mock_response)

        await http_client.get("https://example.com")

        assert mock_client_class.call_args.kwargs["follow_redirects"] is True
        assert mock_client_class.call_args.kwargs["timeout"] == 5

    @pytest.mark.asyncio
    async def test_get_raises_on_error_status(
        self, http_client: HTTPClient, mock_async_client
    ) -> None:
        _, mock_client = mock_async_client
        request = httpx.Request("GET", "https://example.com")
        mock_response = MagicMock(spec=httpx.Response)
        mock_response.raise_for_status = MagicMock(
            side_effect=httpx.HTTPStatusError(
                "403 Forbidden", request=request, response=httpx.Response(403, request=request)
            )
        )
        mock_client.get = AsyncMock(return_value=mock_response)

        with pytest.raises(httpx.HTTPStatusError):
            await http_client.get("https://example.com")

    @pytest.mark.asyncio
    async def test_get_is_attempted_once_on_network_error(
        self, http_client: HTTPClient, mock_async_client
    ) -> None:
        _, mock_client = mock_async_client
        mock_client.get = AsyncMock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(httpx.ConnectError):
            await http_client.get("https://example.com")

        assert mock_client.get.call_count == 1


class TestHTTPClientPost:
    """Tests for POST requests"""

    @pytest.mark.asyncio
    async def test_post_with_json_data(self, http_client: HTTPClient, mock_async_client) -> None:
        _, mock_client = mock_async_client
        mock_response = MagicMock(spec=httpx.Response)
        mock_response.status_code = 201
        mock_client.post = AsyncMock(return_value=mock_response)

        response = await http_client.post("https://example.com", json={"key": "value"})

        assert response.status_code == 201
        assert mock_client.post.call_args.kwargs["json"] == {"key": "value"}

    @pytest.mark.asyncio
    async def test_post_returns_error_responses(
        self, http_client: HTTPClient, mock_async_client
    ) -> None:
        """Error statuses are returned for the caller to inspect, not raised"""
        _, mock_client = mock_async_client
        mock_response = MagicMock(spec=httpx.Response)
        mock_response.status_code = 402
        mock_client.post = AsyncMock(return_value=mock_response)

        response = await http_client.post("https://example.com", json={})

        assert response.status_code == 402
        mock_response.raise_for_status.assert_not_called()
