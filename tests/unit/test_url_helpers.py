"""Tests for URL helper utilities"""

from apiguide.utils.url_helpers import extract_domain, is_http_url, is_valid_url


class TestIsValidUrl:
    """Tests for is_valid_url function"""

    def test_accepts_absolute_urls(self) -> None:
        assert is_valid_url("https://example.com") is True
        assert is_valid_url("http://example.com/docs?v=1") is True
        assert is_valid_url("ftp://files.example.com/spec.json") is True

    def test_rejects_relative_and_garbage(self) -> None:
        assert is_valid_url("not a url") is False
        assert is_valid_url("/docs/api") is False
        assert is_valid_url("example.com/docs") is False
        assert is_valid_url("") is False

    def test_rejects_unparseable_url(self) -> None:
        assert is_valid_url("http://[::1") is False


class TestIsHttpUrl:
    """Tests for is_http_url function"""

    def test_accepts_http_and_https(self) -> None:
        assert is_http_url("https://docs.example.com/api") is True
        assert is_http_url("HTTP://EXAMPLE.COM") is True

    def test_rejects_other_schemes(self) -> None:
        assert is_http_url("ftp://files.example.com") is False
        assert is_http_url("javascript:alert(1)") is False


def test_extract_domain_lowercases_host() -> None:
    assert extract_domain("https://Docs.Example.com/api") == "docs.example.com"
