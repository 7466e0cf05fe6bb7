"""Routes each call to the provider that serves the requested model."""

import structlog

from chatsum.interfaces.ai_provider import IAIProvider

logger = structlog.get_logger(__name__)


class ProviderRouter(IAIProvider):
    """
    Provider facade that dispatches on the model identifier prefix.

    The first matching prefix wins; unmatched models go to the default provider.
    """

    def __init__(self, default: IAIProvider, routes: dict[str, IAIProvider] | None = None):
        """
        :param default: Provider for models without a matching prefix
        :param routes: Model-id prefix -> provider (e.g., {"gemini": GoogleProvider(...)})
        """
        self.default = default
        self.routes = dict(routes or {})

    def resolve(self, model: str | None) -> IAIProvider:
        """
        Find the provider responsible for a model.

        :param model: Model identifier, None means the default provider's model
        :return: Matching provider
        """
        if model:
            for prefix, provider in self.routes.items():
                if model.startswith(prefix):
                    return provider
        return self.default

    async def generate_response(
        self,
        messages: list[dict[str, str]],
        temperature: float | None = None,
        max_tokens: int | None = None,
        model: str | None = None,
        **kwargs,
    ) -> str:
        provider = self.resolve(model)
        logger.debug("provider_resolved", model=model, provider=type(provider).__name__)
        return await provider.generate_response(
            messages,
            temperature=temperature,
            max_tokens=max_tokens,
            model=model,
            **kwargs,
        )

    def get_model_name(self) -> str:
        return self.default.get_model_name()
