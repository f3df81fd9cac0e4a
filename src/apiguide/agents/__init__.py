"""Agents for apiguide"""

from .chat_agent import ChatAgent
from .documentation_agent import DocumentationAgent
from .summary_agent import SummaryAgent

__all__ = [
    "DocumentationAgent",
    "SummaryAgent",
    "ChatAgent",
]
