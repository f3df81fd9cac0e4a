"""Shared fixtures for apiguide tests"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from llama_index.core.llms import ChatMessage, ChatResponse, MessageRole

from apiguide.config import get_settings

ENV_KEYS = ("OPENAI_API_KEY", "ANTHROPIC_API_KEY", "GEMINI_API_KEY", "FIRECRAWL_API_KEY")


@pytest.fixture(autouse=True)
def isolated_settings(request, monkeypatch):
    """
    Blank out keys from the environment (and any .env file) for unit tests.

    Integration tests keep the real environment.
    """
    if request.node.get_closest_marker("integration") is None:
        for name in ENV_KEYS:
            monkeypatch.setenv(name, "")
        monkeypatch.setenv("DEFAULT_LLM_PROVIDER", "openai")
        monkeypatch.delenv("MAX_HISTORY_TURNS", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def chat_response(content: str) -> ChatResponse:
    return ChatResponse(message=ChatMessage(role=MessageRole.ASSISTANT, content=content))


@pytest.fixture
def make_llm():
    """Build a fake LLM whose achat returns the given replies (or raises exceptions)."""

    def _make(*replies):
        llm = MagicMock()
        llm.achat = AsyncMock(
            side_effect=[r if isinstance(r, Exception) else chat_response(r) for r in replies]
        )
        return llm

    return _make
