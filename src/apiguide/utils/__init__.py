"""Utility functions"""

from .html_reducer import reduce_html
from .llm_validation import is_valid_api_key, mask_key, resolve_llm_key
from .page_metadata import extract_page_title
from .url_helpers import extract_domain, is_http_url, is_valid_url

__all__ = [
    # HTML reduction
    "reduce_html",
    "extract_page_title",
    # URL helpers
    "is_valid_url",
    "is_http_url",
    "extract_domain",
    # Key handling
    "is_valid_api_key",
    "mask_key",
    "resolve_llm_key",
]
