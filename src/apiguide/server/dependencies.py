"""FastAPI dependencies providing request-scoped agents."""

from apiguide.agents import ChatAgent, DocumentationAgent, SummaryAgent


def get_documentation_agent() -> DocumentationAgent:
    return DocumentationAgent()


def get_summary_agent() -> SummaryAgent:
    return SummaryAgent()


def get_chat_agent() -> ChatAgent:
    return ChatAgent()
