"""Integration tests for the end-to-end workflow

DocumentationAgent -> SummaryAgent -> ChatAgent, against the real
completion service configured in the environment.

These tests make real LLM API calls. They are marked with
@pytest.mark.integration and are skipped when no valid key is configured.

Usage:
    pytest tests/integration -m integration -v
"""

import pytest

from apiguide.agents import ChatAgent, DocumentationAgent, SummaryAgent
from apiguide.models import AcquisitionRequest, ContentSource, ConversationTurn
from tests.integration.conftest import requires_llm

pytestmark = [pytest.mark.integration]


@requires_llm
@pytest.mark.asyncio
async def test_pasted_docs_to_summary_and_chat(sample_docs) -> None:
    acquired = await DocumentationAgent().execute(AcquisitionRequest(text=sample_docs))
    assert acquired.source == ContentSource.DIRECT

    summary = await SummaryAgent().execute(
        acquired.content, user_intent="create and delete notes", api_name="Notes"
    )
    assert summary.apiName
    assert summary.keyEndpoints

    chat = ChatAgent()
    first = await chat.execute("How do I create a note?", acquired.content, api_name="Notes")
    assert "/v1/notes" in first

    followup = await chat.execute(
        "And how do I delete it?",
        acquired.content,
        history=[
            ConversationTurn(role="user", content="How do I create a note?"),
            ConversationTurn(role="assistant", content=first),
        ],
        api_name="Notes",
    )
    assert "DELETE" in followup.upper()


@pytest.mark.asyncio
async def test_basic_fetch_real_page() -> None:
    """Fetch a static documentation page without an extractor key"""
    result = await DocumentationAgent().execute(
        AcquisitionRequest(url="https://docs.python.org/3/library/json.html")
    )

    assert result.source in (ContentSource.BASIC_FETCH, ContentSource.MANAGED_EXTRACTOR)
    assert "json" in result.content.lower()
    assert len(result.content) > 200
