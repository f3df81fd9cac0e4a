"""Pydantic request and response models for the HTTP API.

Field aliases match the browser client's camelCase payloads; snake_case names
are accepted too. Required-ness is checked by the agents, not here, so that
a missing field produces the same ``{"error": ...}`` body as an empty one.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from apiguide.models import ConversationTurn


class _Request(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class CrawlRequest(_Request):
    url: str | None = None
    text: str | None = None
    extractor_key: str | None = Field(None, alias="extractorKey")


class AnalyzeRequest(_Request):
    content: str | None = Field(None, alias="docsContent")
    user_intent: str | None = Field(None, alias="userContext")
    api_name: str | None = Field(None, alias="apiName")
    llm_key: str | None = Field(None, alias="openaiKey")


class ChatRequest(_Request):
    message: str | None = None
    content: str | None = Field(None, alias="docsContent")
    history: list[ConversationTurn] | None = Field(None, alias="conversationHistory")
    api_name: str | None = Field(None, alias="apiName")
    llm_key: str | None = Field(None, alias="openaiKey")


class CrawlResponse(BaseModel):
    content: str
    source: str
    title: str | None = None


class AnalyzeResponse(BaseModel):
    analysis: dict[str, Any]


class ChatResponse(BaseModel):
    response: str


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None
