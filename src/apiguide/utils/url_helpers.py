"""URL validation utilities"""

from urllib.parse import urlparse


def is_valid_url(url: str) -> bool:
    """
    Check if a URL is absolute (has both a scheme and a host).

    Args:
        url: URL to validate

    Returns:
        True if URL has valid scheme and netloc

    Examples:
        >>> is_valid_url("https://example.com")
        True
        >>> is_valid_url("not a url")
        False
    """
    try:
        result = urlparse(url)
        return all([result.scheme, result.netloc])
    except ValueError:
        return False


def is_http_url(url: str) -> bool:
    """Check if a URL is an absolute http(s) URL that can be fetched directly."""
    return is_valid_url(url) and urlparse(url).scheme.lower() in ("http", "https")


def extract_domain(url: str) -> str:
    """
    Extract the host from a URL, lowercased.

    Examples:
        >>> extract_domain("https://Docs.Example.com/api")
        'docs.example.com'
    """
    return urlparse(url).netloc.lower()
