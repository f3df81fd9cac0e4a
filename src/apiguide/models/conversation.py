"""Conversation history data models"""

from typing import Literal

from pydantic import BaseModel


class ConversationTurn(BaseModel):
    """One prior message, replayed verbatim to the completion service"""

    role: Literal["user", "assistant"]
    content: str
