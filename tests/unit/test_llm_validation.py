"""Tests for API key resolution"""

from apiguide.config import Settings
from apiguide.utils.llm_validation import is_valid_api_key, mask_key, resolve_llm_key

REAL_LOOKING_OPENAI_KEY = "sk-" + "a1B2c3D4" * 6


class TestIsValidApiKey:
    """Tests for is_valid_api_key function"""

    def test_rejects_missing_key(self) -> None:
        assert is_valid_api_key(None, "openai") is False
        assert is_valid_api_key("", "openai") is False

    def test_rejects_placeholders(self) -> None:
        assert is_valid_api_key("sk-test-key-not-real", "openai") is False
        assert is_valid_api_key("sk-ant-REDACTED", "anthropic") is False

    def test_checks_provider_format(self) -> None:
        assert is_valid_api_key(REAL_LOOKING_OPENAI_KEY, "openai") is True
        assert is_valid_api_key("xx-" + "a" * 40, "openai") is False
        assert is_valid_api_key("sk-ant-" + "b" * 40, "anthropic") is True
        assert is_valid_api_key("AIzaSy" + "c" * 33, "gemini") is True
        assert is_valid_api_key("short", "gemini") is False

    def test_rejects_unknown_provider(self) -> None:
        assert is_valid_api_key(REAL_LOOKING_OPENAI_KEY, "mystery") is False


class TestResolveLlmKey:
    """Tests for resolve_llm_key function"""

    def test_explicit_key_wins(self) -> None:
        settings = Settings(openai_api_key=REAL_LOOKING_OPENAI_KEY)
        assert resolve_llm_key("sk-user-supplied", settings, "openai") == "sk-user-supplied"

    def test_explicit_key_is_not_format_checked(self) -> None:
        settings = Settings(openai_api_key="")
        assert resolve_llm_key("anything", settings, "openai") == "anything"

    def test_falls_back_to_configured_key(self) -> None:
        settings = Settings(openai_api_key=REAL_LOOKING_OPENAI_KEY)
        assert resolve_llm_key(None, settings, "openai") == REAL_LOOKING_OPENAI_KEY
        assert resolve_llm_key("   ", settings, "openai") == REAL_LOOKING_OPENAI_KEY

    def test_ignores_placeholder_fallback(self) -> None:
        settings = Settings(openai_api_key="sk-test-key-not-real-at-all")
        assert resolve_llm_key(None, settings, "openai") is None

    def test_none_when_nothing_available(self) -> None:
        settings = Settings(openai_api_key="")
        assert resolve_llm_key(None, settings, "openai") is None


def test_mask_key_never_reveals_full_key() -> None:
    assert mask_key(REAL_LOOKING_OPENAI_KEY) == "sk-a..."
    assert mask_key(None) == "<none>"
