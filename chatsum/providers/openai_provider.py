"""
OpenAI provider implementation using LangChain.

Provides chat completion functionality via OpenAI's API (or any OpenAI-compatible
gateway) with the model chosen per call.
"""

import structlog
from langchain_openai import ChatOpenAI

from chatsum.core.constants import (
    DEFAULT_PROVIDER_MAX_TOKENS,
    DEFAULT_PROVIDER_MODEL,
    DEFAULT_PROVIDER_TEMPERATURE,
)
from chatsum.interfaces.ai_provider import AIProviderError, IAIProvider
from chatsum.providers._messages import build_langchain_messages, extract_text

logger = structlog.get_logger(__name__)


class OpenAIProvider(IAIProvider):
    """OpenAI LLM provider implementation using LangChain."""

    def __init__(
        self,
        api_key: str,
        model_name: str = DEFAULT_PROVIDER_MODEL,
        default_temperature: float = DEFAULT_PROVIDER_TEMPERATURE,
        default_max_tokens: int = DEFAULT_PROVIDER_MAX_TOKENS,
        base_url: str | None = None,
    ):
        """
        Initialize OpenAI provider.

        :param api_key: OpenAI API key
        :param model_name: Default model (e.g., 'gpt-4', 'gpt-4-0125-preview')
        :param default_temperature: Default temperature for responses
        :param default_max_tokens: Default max tokens for responses
        :param base_url: Optional OpenAI-compatible endpoint
        """
        self.api_key = api_key
        self.model_name = model_name
        self.default_temperature = default_temperature
        self.default_max_tokens = default_max_tokens
        self.base_url = base_url

        self.llm = self._create_llm(model_name, default_temperature, default_max_tokens)
        self._llm_cache: dict[tuple[str, float, int], ChatOpenAI] = {}

    def _create_llm(self, model: str, temperature: float, max_tokens: int, **kwargs) -> ChatOpenAI:
        return ChatOpenAI(
            api_key=self.api_key,
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
            base_url=self.base_url,
            **kwargs,
        )

    def _get_llm_override(
        self,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs,
    ) -> ChatOpenAI:
        """
        Get LLM instance with parameter overrides if needed.

        Override clients are cached per (model, temperature, max_tokens) so retries
        and repeated summaries reuse one client; extra kwargs always get a fresh one.

        :param model: Override default model
        :param temperature: Override default temperature
        :param max_tokens: Override default max_tokens
        :param kwargs: Additional OpenAI-specific parameters
        :return: ChatOpenAI instance (either default or with overrides)
        """
        if model is None and temperature is None and max_tokens is None and not kwargs:
            return self.llm

        key = (
            model or self.model_name,
            temperature if temperature is not None else self.default_temperature,
            max_tokens if max_tokens is not None else self.default_max_tokens,
        )
        if kwargs:
            return self._create_llm(*key, **kwargs)

        if key not in self._llm_cache:
            self._llm_cache[key] = self._create_llm(*key)
        return self._llm_cache[key]

    async def generate_response(
        self,
        messages: list[dict[str, str]],
        temperature: float | None = None,
        max_tokens: int | None = None,
        model: str | None = None,
        **kwargs,
    ) -> str:
        """
        Generate chat completion response from OpenAI.

        :param messages: List of message dicts with 'role' and 'content' keys
        :param temperature: Override default temperature
        :param max_tokens: Override default max_tokens
        :param model: Override default model for this call
        :param kwargs: Additional OpenAI-specific parameters
        :return: Generated response text
        :raises AIProviderError: If OpenAI API call fails
        """
        try:
            lc_messages = build_langchain_messages(messages)
            llm = self._get_llm_override(model, temperature, max_tokens, **kwargs)

            response = await llm.ainvoke(lc_messages)
            return extract_text(response.content)

        except Exception as e:
            logger.error("openai_call_failed", model=model or self.model_name, error=str(e))
            raise AIProviderError(f"Failed to generate response: {str(e)}", original_error=e)

    def get_model_name(self) -> str:
        """
        Get the default OpenAI model name.

        :return: Model identifier (e.g., 'gpt-4')
        """
        return self.model_name
