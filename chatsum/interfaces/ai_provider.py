"""
AI Provider interface for LLM chat completion services.

This interface abstracts LLM functionality, allowing different providers
(OpenAI, Google, OpenAI-compatible gateways) to be used interchangeably through
dependency injection. The model is chosen per call so that one provider can
serve every summary tier.
"""

from abc import ABC, abstractmethod


class IAIProvider(ABC):
    """Abstract interface for AI/LLM chat completion services."""

    @abstractmethod
    async def generate_response(
        self,
        messages: list[dict[str, str]],
        temperature: float | None = None,
        max_tokens: int | None = None,
        model: str | None = None,
        **kwargs,
    ) -> str:
        """
        Generate chat completion response from LLM.

        :param messages: List of message dicts with 'role' and 'content' keys (e.g., [{"role": "user", "content": "Hello"}])
        :param temperature: Override default temperature (0.0-2.0)
        :param max_tokens: Override default maximum tokens in response
        :param model: Override default model identifier for this call
        :param kwargs: Additional provider-specific parameters
        :return: Generated response text, empty string if the model produced nothing
        :raises AIProviderError: If LLM call fails
        """
        pass

    @abstractmethod
    def get_model_name(self) -> str:
        """
        Get the default model name being used.

        :return: Model identifier (e.g., 'gpt-4', 'gemini-1.5-flash')
        """
        pass


class AIProviderError(Exception):
    """Exception raised when AI provider operations fail (transient transport error)."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


class ProviderConfigurationError(ValueError):
    """Exception raised when a provider cannot be built from settings."""
