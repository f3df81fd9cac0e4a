"""Shared fixtures and configuration for integration tests"""

import logging

import pytest

from apiguide.config import get_settings
from apiguide.utils.llm_validation import configured_api_key, is_valid_api_key

logger = logging.getLogger(__name__)


def _has_valid_llm_api_key() -> bool:
    """
    Check if a VALID key is configured for the default provider.

    Used by pytest.mark.skipif to skip tests that require real LLM API access.
    """
    settings = get_settings()
    provider = settings.default_llm_provider
    has_key = is_valid_api_key(configured_api_key(settings, provider), provider)
    if not has_key:
        logger.warning(f"⚠️  No valid {provider} API key found - LLM integration tests skipped")
    return has_key


# Pytest marker for tests that require a real LLM API key
requires_llm = pytest.mark.skipif(
    not _has_valid_llm_api_key(),
    reason="Requires a valid API key for DEFAULT_LLM_PROVIDER. "
    "Skipping to avoid API costs. Run locally with a valid key to test.",
)


@pytest.fixture(scope="session")
def sample_docs() -> str:
    """Small but realistic documentation page as pasted text"""
    return """# Notes API

The Notes API stores short text notes.

## Authentication
Send your key in the `Authorization: Bearer <key>` header.

## Endpoints
- `GET /v1/notes` lists notes. Query parameter `limit` (default 20).
- `POST /v1/notes` creates a note. JSON body: `{"text": "..."}`.
- `DELETE /v1/notes/{id}` deletes a note.

## Rate limits
100 requests per minute per key.
"""
