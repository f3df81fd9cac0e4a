"""
Agent 3: Documentation Q&A

Answers follow-up questions about acquired documentation. The whole (bounded)
document travels in the system turn on every call, followed by the prior
conversation and the new question; there is no retrieval index.
"""

import logging
from collections.abc import Sequence

from llama_index.core.llms import ChatMessage, MessageRole

from apiguide.agents.base import BaseAgent
from apiguide.exceptions import ValidationError
from apiguide.models import ConversationTurn
from apiguide.prompts import build_chat_system_prompt

logger = logging.getLogger(__name__)

_ROLES = {"user": MessageRole.USER, "assistant": MessageRole.ASSISTANT}


class ChatAgent(BaseAgent):
    """
    Agent for conversational questions about API documentation.

    Stateless: the caller owns the conversation history and passes it on each
    call. History is replayed in the order given. When ``max_history_turns``
    is set, only the most recent turns are sent.

    Example:
        >>> agent = ChatAgent()
        >>> answer = await agent.execute(
        ...     "How do I create a customer?", docs, history=[], llm_key="sk-..."
        ... )
        >>> print(answer)
    """

    failure_message = "Failed to process chat message"

    def __init__(self, max_history_turns: int | None = None, **kwargs) -> None:
        """
        Initialize chat agent.

        Args:
            max_history_turns: Cap on replayed history (default from settings,
                None replays everything)
            **kwargs: Additional arguments for BaseAgent (llm, verbose)
        """
        super().__init__(**kwargs)
        self.max_history_turns = (
            max_history_turns
            if max_history_turns is not None
            else self.settings.max_history_turns
        )

    async def execute(
        self,
        message: str,
        content: str,
        history: Sequence[ConversationTurn] = (),
        api_name: str | None = None,
        llm_key: str | None = None,
    ) -> str:
        """
        Answer one user message against the documentation.

        Args:
            message: The new user question
            content: Documentation text (truncated to ``chat_max_content_chars``)
            history: Prior turns, oldest first
            api_name: Name of the API, if known
            llm_key: Completion-service key for this call

        Returns:
            The markdown answer, as returned by the service

        Raises:
            AuthError: If no key is available or the key is rejected
            ValidationError: If message or content is empty
            UpstreamError: If the service fails or returns nothing
        """
        llm = self._resolve_llm(
            llm_key,
            temperature=self.settings.chat_temperature,
            max_tokens=self.settings.chat_max_tokens,
        )

        if not message or not message.strip() or not content or not content.strip():
            raise ValidationError("Message and documentation content are required")

        messages = self.build_messages(message, content, history, api_name)
        self._log(f"Processing query with {len(messages) - 2} prior turns: {message[:80]}")

        return await self._complete(llm, messages)

    def build_messages(
        self,
        message: str,
        content: str,
        history: Sequence[ConversationTurn] = (),
        api_name: str | None = None,
    ) -> list[ChatMessage]:
        """
        Build the message sequence: system turn, replayed history, new message.

        Returns:
            Messages in the exact order they are sent
        """
        bounded = content[: self.settings.chat_max_content_chars]
        messages = [
            ChatMessage(
                role=MessageRole.SYSTEM,
                content=build_chat_system_prompt(bounded, api_name),
            )
        ]

        turns = list(history)
        if self.max_history_turns is not None and len(turns) > self.max_history_turns:
            logger.info(
                f"Replaying last {self.max_history_turns} of {len(turns)} conversation turns"
            )
            turns = turns[len(turns) - self.max_history_turns :]

        for turn in turns:
            messages.append(ChatMessage(role=_ROLES[turn.role], content=turn.content))

        messages.append(ChatMessage(role=MessageRole.USER, content=message))
        return messages
