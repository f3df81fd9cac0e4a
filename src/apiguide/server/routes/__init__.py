"""HTTP routes"""

from . import analyze, chat, crawl, health

__all__ = ["analyze", "chat", "crawl", "health"]
