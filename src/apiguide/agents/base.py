"""Base agent class for all apiguide agents"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from llama_index.core.llms import LLM, ChatMessage
from llama_index.llms.anthropic import Anthropic
from llama_index.llms.gemini import Gemini
from llama_index.llms.openai import OpenAI

from apiguide.config import get_settings
from apiguide.exceptions import AuthError, UpstreamError
from apiguide.utils.llm_validation import mask_key, resolve_llm_key

logger = logging.getLogger(__name__)

PROVIDER_LABELS = {"openai": "OpenAI", "anthropic": "Anthropic", "gemini": "Gemini"}

# Anthropic requires an explicit output ceiling
ANTHROPIC_DEFAULT_MAX_TOKENS = 4096


def is_auth_failure(error: Exception) -> bool:
    """Check whether a completion-service exception means the key was rejected."""
    status = getattr(error, "status_code", None)
    if status is None:
        response = getattr(error, "response", None)
        status = getattr(response, "status_code", None)
    code = getattr(error, "code", None)
    return status == 401 or code in (401, "invalid_api_key")


class BaseAgent(ABC):
    """
    Base class for agents that call a completion service.

    An LLM is built per call from the key supplied for that call, so no
    credential outlives the request that carried it. Tests (and callers that
    manage their own client) can inject a ready ``llm`` instead.
    """

    failure_message = "Completion request failed"

    def __init__(
        self,
        llm: LLM | None = None,
        verbose: bool = False,
    ) -> None:
        """
        Initialize the base agent.

        Args:
            llm: Language model to use for every call. If None, one is created
                per call from the supplied or configured key.
            verbose: Whether to enable verbose logging.
        """
        self.settings = get_settings()
        self.verbose = verbose
        self.llm = llm

    @property
    def provider(self) -> str:
        return self.settings.default_llm_provider

    @property
    def provider_label(self) -> str:
        return PROVIDER_LABELS.get(self.provider, self.provider)

    def _resolve_llm(
        self,
        llm_key: str | None,
        temperature: float,
        max_tokens: int | None = None,
        json_mode: bool = False,
    ) -> LLM:
        """
        Return the LLM for one call.

        Raises:
            AuthError: If no key was supplied and none is configured
        """
        if self.llm is not None:
            return self.llm

        api_key = resolve_llm_key(llm_key, self.settings, self.provider)
        if not api_key:
            raise AuthError(
                f"{self.provider_label} API key is required. Please add your API key in settings."
            )

        self._log(f"Creating {self.provider_label} LLM (key {mask_key(api_key)})")
        return self._create_llm(api_key, temperature, max_tokens, json_mode)

    def _create_llm(
        self,
        api_key: str,
        temperature: float,
        max_tokens: int | None,
        json_mode: bool,
    ) -> LLM:
        """
        Create an LLM for the configured provider.

        JSON mode is only requested from OpenAI; other providers rely on the
        prompt asking for JSON.
        """
        provider = self.provider

        if provider == "openai":
            kwargs: dict[str, Any] = {
                "model": self.settings.default_model_openai,
                "api_key": api_key,
                "temperature": temperature,
                "timeout": self.settings.request_timeout,
                "max_retries": 0,
            }
            if max_tokens is not None:
                kwargs["max_tokens"] = max_tokens
            if json_mode:
                kwargs["additional_kwargs"] = {"response_format": {"type": "json_object"}}
            # Add custom API base if provided
            if self.settings.openai_api_base:
                kwargs["api_base"] = self.settings.openai_api_base
            return OpenAI(**kwargs)

        elif provider == "anthropic":
            return Anthropic(
                model=self.settings.default_model_anthropic,
                api_key=api_key,
                temperature=temperature,
                max_tokens=max_tokens or ANTHROPIC_DEFAULT_MAX_TOKENS,
                timeout=self.settings.request_timeout,
                max_retries=0,
            )

        elif provider == "gemini":
            kwargs = {
                "model": self.settings.default_model_gemini,
                "api_key": api_key,
                "temperature": temperature,
            }
            if max_tokens is not None:
                kwargs["max_tokens"] = max_tokens
            return Gemini(**kwargs)

        raise ValueError(f"Unknown LLM provider: {provider}")

    async def _complete(self, llm: LLM, messages: Sequence[ChatMessage]) -> str:
        """
        Issue exactly one chat completion and return its text.

        Raises:
            AuthError: If the service rejected the key
            UpstreamError: On any other service failure or an empty response
        """
        try:
            response = await llm.achat(list(messages))
        except Exception as e:
            if is_auth_failure(e):
                logger.warning(f"{self.provider_label} rejected the API key: {e}")
                raise AuthError(
                    f"Invalid {self.provider_label} API key. Please check your key in settings."
                ) from e
            logger.error(f"{self.failure_message}: {e}")
            raise UpstreamError(self.failure_message, str(e)) from e

        content = response.message.content
        if not content or not content.strip():
            raise UpstreamError(self.failure_message, "No response from AI")

        self._log(f"Received {len(content)} chars from {self.provider_label}")
        return content

    @abstractmethod
    async def execute(self, *args: Any, **kwargs: Any) -> Any:
        """Execute the agent's main task"""
        pass

    def _log(self, message: str) -> None:
        """Log message if verbose mode is enabled"""
        if self.verbose:
            print(f"[{self.__class__.__name__}] {message}")
