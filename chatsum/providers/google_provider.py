"""
Google Gemini provider implementation using LangChain.

Provides chat completion functionality via Google's Gemini API.
"""

import structlog
from langchain_google_genai import ChatGoogleGenerativeAI

from chatsum.core.constants import (
    DEFAULT_GOOGLE_PROVIDER_MODEL,
    DEFAULT_PROVIDER_MAX_TOKENS,
    DEFAULT_PROVIDER_TEMPERATURE,
)
from chatsum.interfaces.ai_provider import AIProviderError, IAIProvider
from chatsum.providers._messages import build_langchain_messages, extract_text

logger = structlog.get_logger(__name__)


class GoogleProvider(IAIProvider):
    """Google Gemini LLM provider implementation using LangChain."""

    def __init__(
        self,
        api_key: str,
        model_name: str = DEFAULT_GOOGLE_PROVIDER_MODEL,
        default_temperature: float = DEFAULT_PROVIDER_TEMPERATURE,
        default_max_tokens: int = DEFAULT_PROVIDER_MAX_TOKENS,
    ):
        """
        Initialize Google Gemini provider.

        :param api_key: Google API key
        :param model_name: Default model (e.g., 'gemini-1.5-flash', 'gemini-1.5-pro')
        :param default_temperature: Default temperature for responses
        :param default_max_tokens: Default max tokens for responses
        """
        self.api_key = api_key
        self.model_name = model_name
        self.default_temperature = default_temperature
        self.default_max_tokens = default_max_tokens

        self.llm = ChatGoogleGenerativeAI(
            google_api_key=api_key,
            model=model_name,
            temperature=default_temperature,
            max_output_tokens=default_max_tokens,
        )
        self._llm_cache: dict[tuple[str, float, int], ChatGoogleGenerativeAI] = {}

    def _get_llm_override(
        self,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs,
    ) -> ChatGoogleGenerativeAI:
        """Get LLM instance with parameter overrides, cached per (model, temperature, max_tokens)."""
        if model is None and temperature is None and max_tokens is None and not kwargs:
            return self.llm

        key = (
            model or self.model_name,
            temperature if temperature is not None else self.default_temperature,
            max_tokens if max_tokens is not None else self.default_max_tokens,
        )
        if not kwargs and key in self._llm_cache:
            return self._llm_cache[key]

        llm = ChatGoogleGenerativeAI(
            google_api_key=self.api_key,
            model=key[0],
            temperature=key[1],
            max_output_tokens=key[2],
            **kwargs,
        )
        if not kwargs:
            self._llm_cache[key] = llm
        return llm

    async def generate_response(
        self,
        messages: list[dict[str, str]],
        temperature: float | None = None,
        max_tokens: int | None = None,
        model: str | None = None,
        **kwargs,
    ) -> str:
        """
        Generate chat completion response from Google Gemini.

        :param messages: List of message dicts with 'role' and 'content' keys
        :param temperature: Override default temperature
        :param max_tokens: Override default max_tokens
        :param model: Override default model for this call
        :param kwargs: Additional Gemini-specific parameters
        :return: Generated response text
        :raises AIProviderError: If Gemini API call fails
        """
        try:
            lc_messages = build_langchain_messages(messages)
            llm = self._get_llm_override(model, temperature, max_tokens, **kwargs)

            response = await llm.ainvoke(lc_messages)
            return extract_text(response.content)

        except Exception as e:
            logger.error("google_call_failed", model=model or self.model_name, error=str(e))
            raise AIProviderError(f"Failed to generate response: {str(e)}", original_error=e)

    def get_model_name(self) -> str:
        """Get the default Gemini model name."""
        return self.model_name
