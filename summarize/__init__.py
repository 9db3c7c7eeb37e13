"""Three-sentence text summariser backed by a hosted chat-completion API."""

from .inputs import InputError, collect_text
from .services import (
    DEFAULT_REQUEST_CONFIG,
    OpenAIConfig,
    SummarizationClient,
    SummarizationError,
    SummaryRequestConfig,
    SummaryResult,
    TokenUsage,
)

__all__ = [
    "DEFAULT_REQUEST_CONFIG",
    "InputError",
    "OpenAIConfig",
    "SummarizationClient",
    "SummarizationError",
    "SummaryRequestConfig",
    "SummaryResult",
    "TokenUsage",
    "collect_text",
]
