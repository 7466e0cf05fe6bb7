"""Unit tests for summary pipeline wiring."""

from unittest.mock import AsyncMock, patch

import pytest

from chatsum.dependencies.summary_dependencies import (
    get_ai_provider,
    get_conversation_summarizer,
    get_model_table,
    summarize_conversation,
)
from chatsum.interfaces.ai_provider import ProviderConfigurationError
from chatsum.providers.google_provider import GoogleProvider
from chatsum.providers.openai_provider import OpenAIProvider
from chatsum.providers.router import ProviderRouter


@pytest.fixture
def patched_llms():
    """Keep LangChain clients from being constructed."""
    with (
        patch("chatsum.providers.openai_provider.ChatOpenAI") as mock_openai,
        patch("chatsum.providers.google_provider.ChatGoogleGenerativeAI") as mock_google,
    ):
        yield mock_openai, mock_google


@pytest.mark.unit
class TestProviderFactory:
    """Verify factory selects providers correctly and validates keys."""

    def test_openai_only(self, monkeypatch, patched_llms):
        from chatsum.core.config import settings

        monkeypatch.setattr(settings, "openai_api_key", "sk-test")
        monkeypatch.setattr(settings, "google_api_key", None)

        provider = get_ai_provider()

        assert isinstance(provider, ProviderRouter)
        assert isinstance(provider.default, OpenAIProvider)
        assert provider.routes == {}

    def test_google_models_routed_when_key_present(self, monkeypatch, patched_llms):
        from chatsum.core.config import settings

        monkeypatch.setattr(settings, "openai_api_key", "sk-test")
        monkeypatch.setattr(settings, "google_api_key", "g-test")

        provider = get_ai_provider()

        assert isinstance(provider.resolve("gemini-1.5-pro"), GoogleProvider)
        assert isinstance(provider.resolve("gpt-4"), OpenAIProvider)

    def test_google_only_becomes_default(self, monkeypatch, patched_llms):
        from chatsum.core.config import settings

        monkeypatch.setattr(settings, "openai_api_key", None)
        monkeypatch.setattr(settings, "google_api_key", "g-test")
        monkeypatch.setattr(settings, "summary_capable_model", "gemini-1.5-pro")
        monkeypatch.setattr(settings, "summary_fast_model", "gemini-1.5-flash")
        monkeypatch.setattr(settings, "summary_fallback_model", "gemini-1.5-flash-8b")

        provider = get_ai_provider()

        assert isinstance(provider.default, GoogleProvider)
        table = get_model_table()
        for model in (table.capable, table.fast, table.fallback):
            assert isinstance(provider.resolve(model), GoogleProvider)

    def test_google_only_with_openai_tiers_raises(self, monkeypatch, patched_llms):
        from chatsum.core.config import settings

        monkeypatch.setattr(settings, "openai_api_key", None)
        monkeypatch.setattr(settings, "google_api_key", "g-test")
        monkeypatch.setattr(settings, "summary_capable_model", "gpt-4")
        monkeypatch.setattr(settings, "summary_fast_model", "gpt-4-0125-preview")
        monkeypatch.setattr(settings, "summary_fallback_model", "gpt-3.5-turbo-0125")

        with pytest.raises(ProviderConfigurationError, match="OPENAI_API_KEY is required for capable model"):
            get_ai_provider()

        patched_llms[1].assert_not_called()

    def test_gemini_fallback_without_google_key_raises(self, monkeypatch, patched_llms):
        from chatsum.core.config import settings

        monkeypatch.setattr(settings, "openai_api_key", "sk-test")
        monkeypatch.setattr(settings, "google_api_key", None)
        monkeypatch.setattr(settings, "summary_fallback_model", "gemini-1.5-flash")

        with pytest.raises(ProviderConfigurationError, match="GOOGLE_API_KEY is required for fallback model"):
            get_ai_provider()

    def test_missing_keys_raise(self, monkeypatch):
        from chatsum.core.config import settings

        monkeypatch.setattr(settings, "openai_api_key", None)
        monkeypatch.setattr(settings, "google_api_key", None)

        with pytest.raises(ProviderConfigurationError, match="OPENAI_API_KEY"):
            get_ai_provider()


@pytest.mark.unit
class TestSummarizerFactory:
    def test_model_table_from_settings(self, monkeypatch):
        from chatsum.core.config import settings

        monkeypatch.setattr(settings, "summary_capable_model", "big")
        monkeypatch.setattr(settings, "summary_fast_model", "small")
        monkeypatch.setattr(settings, "summary_fallback_model", "tiny")

        table = get_model_table()

        assert (table.capable, table.fast, table.fallback) == ("big", "small", "tiny")

    def test_summarizer_uses_settings(self, monkeypatch, mock_ai_provider):
        from chatsum.core.config import settings

        monkeypatch.setattr(settings, "summary_max_attempts", 5)
        monkeypatch.setattr(settings, "summary_fallback_model", "tiny")
        monkeypatch.setattr(settings, "summary_capable_min_past_messages", 3)

        summarizer = get_conversation_summarizer(ai_provider=mock_ai_provider)

        assert summarizer.invoker.ai_provider is mock_ai_provider
        assert summarizer.invoker.max_attempts == 5
        assert summarizer.invoker.fallback_model == "tiny"
        assert summarizer.model_selector.capable_min_past_messages == 3

    async def test_summarize_conversation_entry_point(self, monkeypatch, sample_organization, make_conversation):
        provider = AsyncMock()
        provider.generate_response.return_value = "Summary"
        monkeypatch.setattr("chatsum.dependencies.summary_dependencies.get_ai_provider", lambda: provider)
        monkeypatch.setattr("chatsum.prompts.summary_prompt.count_tokens", lambda text: 1)

        result = await summarize_conversation(make_conversation(1), None, sample_organization)

        assert result == "Summary"
        provider.generate_response.assert_awaited_once()
