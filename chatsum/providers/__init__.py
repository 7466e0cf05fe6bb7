"""AI Provider implementations for LLM integration."""

from chatsum.providers.google_provider import GoogleProvider
from chatsum.providers.openai_provider import OpenAIProvider
from chatsum.providers.router import ProviderRouter

__all__ = ["OpenAIProvider", "GoogleProvider", "ProviderRouter"]
