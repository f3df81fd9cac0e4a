"""apiguide - turn API documentation into a usable guide and ask questions about it

This is the core library that provides:
- DocumentationAgent: Acquires documentation from a URL or pasted text
- SummaryAgent: Summarizes documentation into a structured guide
- ChatAgent: Answers follow-up questions against the documentation
"""

from apiguide.agents import ChatAgent, DocumentationAgent, SummaryAgent

__version__ = "0.1.0"

__all__ = [
    "DocumentationAgent",
    "SummaryAgent",
    "ChatAgent",
]
