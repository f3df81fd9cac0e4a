"""External service clients"""

from .firecrawl_client import FirecrawlClient, ScrapeResult
from .http_client import HTTPClient

__all__ = ["HTTPClient", "FirecrawlClient", "ScrapeResult"]
