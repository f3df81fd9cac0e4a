"""
Page metadata extraction for fetched documentation pages.

Runs alongside the regex reducer, which strips ``<head>`` content as plain
tags and cannot recover the page title on its own.
"""

import logging

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


def extract_page_title(html_content: str) -> str | None:
    """
    Extract a page title from HTML.

    Prefers ``<title>``, then the first ``<h1>``.

    Args:
        html_content: Raw HTML content

    Returns:
        Title text, or None if the page has neither element

    Example:
        >>> extract_page_title("<html><head><title>Stripe API</title></head></html>")
        'Stripe API'
    """
    if not html_content:
        return None

    soup = BeautifulSoup(html_content, "lxml")

    title_tag = soup.find("title")
    if title_tag and title_tag.get_text(strip=True):
        return title_tag.get_text(strip=True)

    h1_tag = soup.find("h1")
    if h1_tag and h1_tag.get_text(strip=True):
        return h1_tag.get_text(strip=True)

    return None
