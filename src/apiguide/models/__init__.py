"""Data models for apiguide"""

from .acquisition import (
    AcquisitionRequest,
    AcquisitionResult,
    ContentSource,
    Credentials,
)
from .conversation import ConversationTurn
from .summary import (
    Authentication,
    Endpoint,
    GettingStarted,
    GettingStartedStep,
    RateLimits,
    SummaryDocument,
    UseCase,
)

__all__ = [
    "AcquisitionRequest",
    "AcquisitionResult",
    "ContentSource",
    "Credentials",
    "ConversationTurn",
    "SummaryDocument",
    "GettingStarted",
    "GettingStartedStep",
    "Authentication",
    "UseCase",
    "Endpoint",
    "RateLimits",
]
