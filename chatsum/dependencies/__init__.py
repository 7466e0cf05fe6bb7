"""Factory functions wiring providers and services from settings."""

from chatsum.dependencies.summary_dependencies import (
    get_ai_provider,
    get_conversation_summarizer,
    get_model_table,
    summarize_conversation,
)

__all__ = [
    "get_ai_provider",
    "get_conversation_summarizer",
    "get_model_table",
    "summarize_conversation",
]
