"""
Dependency wiring for the summary pipeline.

Provides factory functions that build providers and the summarizer from settings.
"""

from collections.abc import Sequence

import structlog

from chatsum.core.config import settings
from chatsum.core.constants import GOOGLE_MODEL_PREFIX
from chatsum.interfaces.ai_provider import IAIProvider, ProviderConfigurationError
from chatsum.prompts.summary_prompt import SummaryPromptBuilder
from chatsum.providers.google_provider import GoogleProvider
from chatsum.providers.openai_provider import OpenAIProvider
from chatsum.providers.router import ProviderRouter
from chatsum.schemas.summary_schemas import ChatMessage, LLMCallParams, OrganizationProfile, SummaryModelTable
from chatsum.services.summary.conversation_summarizer import ConversationSummarizer
from chatsum.services.summary.model_selector import ModelSelector
from chatsum.services.summary.resilient_invoker import ResilientInvoker

logger = structlog.get_logger(__name__)


def get_model_table() -> SummaryModelTable:
    """
    Build the summary tier table from settings.

    :return: Capable, fast, and fallback model identifiers
    """
    return SummaryModelTable(
        capable=settings.summary_capable_model,
        fast=settings.summary_fast_model,
        fallback=settings.summary_fallback_model,
    )


def get_ai_provider() -> IAIProvider:
    """
    Get configured AI provider instance.

    OpenAI (or the configured OpenAI-compatible gateway) serves every model
    unless a Google key is present, in which case 'gemini*' models are routed
    to Google. Each tier of the model table is checked against the configured
    keys so a misrouted setup fails here rather than on every summary.

    :return: Provider router over the configured providers
    :raises ProviderConfigurationError: If no key is configured or a tier model has no provider
    """
    if not settings.is_ai_available:
        raise ProviderConfigurationError("OPENAI_API_KEY or GOOGLE_API_KEY is required for summarization")

    # Every tier must be servable, including the fallback
    for tier, model in get_model_table().model_dump().items():
        if model.startswith(GOOGLE_MODEL_PREFIX):
            if not settings.google_api_key:
                raise ProviderConfigurationError(f"GOOGLE_API_KEY is required for {tier} model '{model}'")
        elif not settings.openai_api_key:
            raise ProviderConfigurationError(f"OPENAI_API_KEY is required for {tier} model '{model}'")

    routes: dict[str, IAIProvider] = {}
    if settings.google_api_key:
        routes[GOOGLE_MODEL_PREFIX] = GoogleProvider(api_key=settings.google_api_key)

    if settings.openai_api_key:
        default: IAIProvider = OpenAIProvider(
            api_key=settings.openai_api_key,
            model_name=settings.summary_fast_model,
            base_url=settings.openai_base_url,
        )
    else:
        # Only reachable when every tier is a Gemini model
        default = routes[GOOGLE_MODEL_PREFIX]

    logger.info("ai_provider_initialized", default_model=default.get_model_name(), routes=list(routes))
    return ProviderRouter(default=default, routes=routes)


def get_conversation_summarizer(ai_provider: IAIProvider | None = None) -> ConversationSummarizer:
    """
    Create the conversation summarizer with settings-driven configuration.

    :param ai_provider: Provider to use, built from settings when omitted
    :return: Ready-to-use summarizer
    """
    model_table = get_model_table()

    return ConversationSummarizer(
        prompt_builder=SummaryPromptBuilder(
            history_token_budget=settings.summary_history_token_budget,
            max_past_messages=settings.summary_max_past_messages,
        ),
        model_selector=ModelSelector(
            model_table=model_table,
            capable_min_past_messages=settings.summary_capable_min_past_messages,
            capable_min_token_count=settings.summary_capable_min_token_count,
        ),
        invoker=ResilientInvoker(
            ai_provider=ai_provider or get_ai_provider(),
            fallback_model=model_table.fallback,
            max_attempts=settings.summary_max_attempts,
            base_delay=settings.summary_retry_base_delay,
            max_delay=settings.summary_retry_max_delay,
        ),
        call_params=LLMCallParams(
            temperature=settings.summary_temperature,
            max_tokens=settings.summary_max_tokens,
        ),
    )


async def summarize_conversation(
    conversation: Sequence[ChatMessage],
    language: str | None,
    organization: OrganizationProfile,
) -> str:
    """
    Summarize a conversation with the settings-configured pipeline.

    :param conversation: Chronological messages
    :param language: Optional output language hint
    :param organization: Organization profile
    :return: Summary text, possibly empty
    :raises AIProviderError: If every attempt of a model tier failed
    """
    summarizer = get_conversation_summarizer()
    return await summarizer.summarize_conversation(conversation, language, organization)
