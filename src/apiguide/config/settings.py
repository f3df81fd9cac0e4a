"""apiguide settings (no database or persistence settings)"""

import logging
import os
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENTS = [
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "curl/8.0.0",
]


class Settings(BaseSettings):
    """Settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # LLM Provider Configuration (fallback keys when the caller passes none)
    openai_api_key: str = ""
    openai_api_base: str | None = None  # For custom OpenAI-compatible APIs
    anthropic_api_key: str = ""
    gemini_api_key: str = ""

    # Managed extractor (Firecrawl)
    firecrawl_api_key: str = ""
    firecrawl_api_base: str = "https://api.firecrawl.dev"

    # Application Configuration
    environment: Literal["development", "staging", "production", "test"] = "development"
    log_level: str = "INFO"

    # Agent Configuration
    default_llm_provider: Literal["openai", "anthropic", "gemini"] = "openai"
    default_model_openai: str = "gpt-4o"
    default_model_anthropic: str = "claude-3-5-sonnet-20241022"
    default_model_gemini: str = "gemini-2.5-flash"

    # Fetch Configuration
    request_timeout: float = 30.0  # seconds
    fetch_user_agents: list[str] = DEFAULT_USER_AGENTS

    # Content bounds (prompt budgets, tune per model context window)
    extractor_max_chars: int = 150_000
    extractor_min_chars: int = 100
    reducer_max_chars: int = 100_000
    basic_fetch_min_chars: int = 200
    summary_max_content_chars: int = 80_000
    chat_max_content_chars: int = 60_000

    # Sampling
    summary_temperature: float = 0.3
    chat_temperature: float = 0.5
    chat_max_tokens: int = 2000

    # None replays the whole conversation
    max_history_turns: int | None = None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


def validate_environment() -> None:
    """
    Validate environment variables on startup.

    Keys are optional here - callers may provide them per request.
    """
    # Skip validation in test mode
    if os.getenv("TESTING") == "true":
        logger.info("Skipping environment validation in test mode")
        return

    settings = get_settings()

    has_llm_key = bool(
        settings.openai_api_key or settings.anthropic_api_key or settings.gemini_api_key
    )
    if not has_llm_key:
        logger.warning(
            "No LLM API keys configured. Callers must supply a key with each request, "
            "or set OPENAI_API_KEY, ANTHROPIC_API_KEY, or GEMINI_API_KEY."
        )

    if not settings.firecrawl_api_key:
        logger.info(
            "FIRECRAWL_API_KEY not set - URL acquisition will use basic fetch only "
            "unless a key is supplied per request."
        )
