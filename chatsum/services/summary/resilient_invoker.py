"""
Resilient Invoker for summary LLM calls.

Wraps the provider call in bounded exponential-backoff retry. A transport error
that survives every attempt propagates; an empty result instead triggers one
independent retry sequence against the fixed fallback model.
"""

import asyncio
from collections.abc import Awaitable, Callable

import structlog
from structlog.typing import FilteringBoundLogger

from chatsum.core.constants import (
    DEFAULT_RETRY_BASE_DELAY_SECONDS,
    DEFAULT_RETRY_MAX_DELAY_SECONDS,
    DEFAULT_SUMMARY_MAX_ATTEMPTS,
)
from chatsum.core.retry import retry_with_backoff
from chatsum.interfaces.ai_provider import AIProviderError, IAIProvider
from chatsum.schemas.summary_schemas import LLMCallParams


class ResilientInvoker:
    """Calls the provider with retry on errors and fallback on empty results."""

    def __init__(
        self,
        ai_provider: IAIProvider,
        fallback_model: str,
        max_attempts: int = DEFAULT_SUMMARY_MAX_ATTEMPTS,
        base_delay: float = DEFAULT_RETRY_BASE_DELAY_SECONDS,
        max_delay: float = DEFAULT_RETRY_MAX_DELAY_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        logger: FilteringBoundLogger | None = None,
    ):
        """
        Initialize resilient invoker.

        :param ai_provider: Transport used for every attempt
        :param fallback_model: Model used when the primary sequence returns nothing
        :param max_attempts: Attempts per model tier
        :param base_delay: Delay in seconds after the first failed attempt
        :param max_delay: Upper bound for a single delay
        :param sleep: Awaitable sleep between attempts
        :param logger: Diagnostic sink, defaults to this module's structlog logger
        """
        self.ai_provider = ai_provider
        self.fallback_model = fallback_model
        self.max_attempts = max_attempts
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.sleep = sleep
        self.logger = logger or structlog.get_logger(__name__)

    async def _call_with_retry(self, prompt: list[dict[str, str]], call_params: LLMCallParams, model: str) -> str:
        result = await retry_with_backoff(
            self.ai_provider.generate_response,
            prompt,
            max_attempts=self.max_attempts,
            base_delay=self.base_delay,
            max_delay=self.max_delay,
            retry_on=AIProviderError,
            sleep=self.sleep,
            temperature=call_params.temperature,
            max_tokens=call_params.max_tokens,
            model=model,
        )
        return result or ""

    async def invoke(self, prompt: list[dict[str, str]], call_params: LLMCallParams, primary_model: str) -> str:
        """
        Obtain a summary, falling back to the fixed fallback model on an empty result.

        :param prompt: Role/content pairs sent unchanged on every attempt
        :param call_params: Sampling settings forwarded to the provider
        :param primary_model: Model chosen by the selector
        :return: Summary text, possibly empty if the fallback also produced nothing
        :raises AIProviderError: If every attempt of a tier's sequence failed
        """
        summary = await self._call_with_retry(prompt, call_params, primary_model)
        self.logger.info("summary_primary_result", model=primary_model, summary=summary)

        if not summary:
            # Organization overrides only apply to the primary call
            self.logger.warning(
                "summary_empty_using_fallback",
                primary_model=primary_model,
                fallback_model=self.fallback_model,
            )
            summary = await self._call_with_retry(prompt, call_params, self.fallback_model)

        self.logger.info("summary_generated", summary=summary)
        return summary
