"""
Resolution and sanity checks for completion-service API keys.

A key passed by the caller always wins and is used as-is; the completion
service is the authority on whether it is valid. The environment fallback
key is only used when it does not look like a test placeholder, so a stray
``OPENAI_API_KEY=test-key`` in a dev ``.env`` never reaches the service.
"""

import logging

from apiguide.config import Settings

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERNS = [
    "test-key",
    "not-real",
    "placeholder",
    "dummy",
    "fake",
    "mock",
    "example",
    "invalid",
]


def mask_key(api_key: str | None) -> str:
    """
    Short preview of a key that is safe to log.

    Examples:
        >>> mask_key("sk-abcdef1234567890")
        'sk-a...'
        >>> mask_key(None)
        '<none>'
    """
    if not api_key:
        return "<none>"
    return f"{api_key[:4]}..."


def is_valid_api_key(api_key: str | None, provider: str) -> bool:
    """
    Check that a key exists, is not a placeholder, and matches the provider's format.

    Examples:
        >>> is_valid_api_key("sk-test-key-not-real", "openai")
        False
        >>> is_valid_api_key("sk-1234567890123456789012345678901234567890", "openai")
        True
        >>> is_valid_api_key(None, "openai")
        False
    """
    if not api_key:
        return False

    api_key_lower = api_key.lower()
    if any(pattern in api_key_lower for pattern in PLACEHOLDER_PATTERNS):
        logger.debug(f"Detected placeholder API key for {provider}: {mask_key(api_key)}")
        return False

    if provider == "openai":
        return api_key.startswith("sk-") and len(api_key) > 20
    if provider == "anthropic":
        return api_key.startswith("sk-ant-") and len(api_key) > 20
    if provider == "gemini":
        # Gemini keys are typically 39 characters long (AIzaSy...)
        return len(api_key) >= 30

    logger.warning(f"Unknown provider '{provider}' - rejecting API key")
    return False


def configured_api_key(settings: Settings, provider: str) -> str:
    """Return the environment key configured for a provider ("" if none)."""
    return {
        "openai": settings.openai_api_key,
        "anthropic": settings.anthropic_api_key,
        "gemini": settings.gemini_api_key,
    }.get(provider, "")


def resolve_llm_key(explicit_key: str | None, settings: Settings, provider: str) -> str | None:
    """
    Pick the key for one completion request.

    Args:
        explicit_key: Key supplied by the caller for this request
        settings: Settings holding the environment fallback keys
        provider: LLM provider name ("openai", "anthropic", "gemini")

    Returns:
        The key to use, or None when neither source provides a usable one
    """
    if explicit_key and explicit_key.strip():
        return explicit_key.strip()

    fallback = configured_api_key(settings, provider)
    if not fallback:
        logger.info(f"No {provider.upper()} API key supplied or configured")
        return None

    if not is_valid_api_key(fallback, provider):
        logger.info(
            f"Ignoring placeholder {provider.upper()} API key from environment: "
            f"{mask_key(fallback)}"
        )
        return None

    return fallback
