"""Pydantic schemas for summarization inputs, prompt context, and configuration tables."""

from chatsum.schemas.summary_schemas import (
    ChatMessage,
    LLMCallParams,
    MessageRole,
    OrganizationProfile,
    PromptContext,
    SummaryModelTable,
)

__all__ = [
    "ChatMessage",
    "LLMCallParams",
    "MessageRole",
    "OrganizationProfile",
    "PromptContext",
    "SummaryModelTable",
]
