"""
Agent 2: Documentation Summary

Sends acquired documentation (plus what the user wants to do with it) to the
completion service and parses the structured guide it returns.
"""

import json
import logging

from llama_index.core.llms import ChatMessage, MessageRole
from pydantic import ValidationError as PydanticValidationError

from apiguide.agents.base import BaseAgent
from apiguide.exceptions import UpstreamError, ValidationError
from apiguide.models import SummaryDocument
from apiguide.prompts import SUMMARY_SYSTEM_PROMPT, build_summary_user_prompt

logger = logging.getLogger(__name__)


class SummaryAgent(BaseAgent):
    """
    Agent that turns API documentation into a ``SummaryDocument``.

    Issues exactly one low-temperature, JSON-mode completion. The reply must
    parse as a JSON object; there is no repair or retry on malformed output.

    Example:
        >>> agent = SummaryAgent()
        >>> summary = await agent.execute(docs, user_intent="send SMS", llm_key="sk-...")
        >>> print(summary.apiName, len(summary.keyEndpoints))
    """

    failure_message = "Failed to analyze documentation"

    async def execute(
        self,
        content: str,
        user_intent: str | None = None,
        api_name: str | None = None,
        llm_key: str | None = None,
    ) -> SummaryDocument:
        """
        Summarize documentation into a structured guide.

        Args:
            content: Documentation text (truncated to ``summary_max_content_chars``)
            user_intent: What the user wants to accomplish, if stated
            api_name: Name of the API, if known
            llm_key: Completion-service key for this call

        Returns:
            Parsed SummaryDocument

        Raises:
            AuthError: If no key is available or the key is rejected
            ValidationError: If content is empty
            UpstreamError: If the service fails or returns unparseable output
        """
        llm = self._resolve_llm(
            llm_key,
            temperature=self.settings.summary_temperature,
            json_mode=True,
        )

        if not content or not content.strip():
            raise ValidationError("Documentation content is required")

        bounded = content[: self.settings.summary_max_content_chars]
        if len(bounded) < len(content):
            self._log(f"Truncated documentation from {len(content)} to {len(bounded)} chars")

        messages = [
            ChatMessage(role=MessageRole.SYSTEM, content=SUMMARY_SYSTEM_PROMPT),
            ChatMessage(
                role=MessageRole.USER,
                content=build_summary_user_prompt(bounded, user_intent, api_name),
            ),
        ]

        raw = await self._complete(llm, messages)
        return self._parse_summary(raw)

    def _parse_summary(self, raw: str) -> SummaryDocument:
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Summary response is not valid JSON: {e}")
            raise UpstreamError(self.failure_message, f"Invalid JSON from AI: {e}") from e

        if not isinstance(data, dict):
            raise UpstreamError(self.failure_message, "Expected a JSON object from AI")

        try:
            return SummaryDocument.model_validate(data)
        except PydanticValidationError as e:
            logger.error(f"Summary response has an unexpected shape: {e}")
            raise UpstreamError(self.failure_message, "Unexpected summary shape from AI") from e
