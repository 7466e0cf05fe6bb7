"""
Conversation Summarizer.

Composes prompt building, model selection and resilient invocation into the
single entry point used to condense a conversation into a short summary.
"""

from collections.abc import Sequence

import structlog
from structlog.typing import FilteringBoundLogger

from chatsum.prompts.summary_prompt import SummaryPromptBuilder
from chatsum.schemas.summary_schemas import ChatMessage, LLMCallParams, OrganizationProfile
from chatsum.services.summary.model_selector import ModelSelector
from chatsum.services.summary.resilient_invoker import ResilientInvoker


class ConversationSummarizer:
    """Stateless orchestration of the summary pipeline."""

    def __init__(
        self,
        prompt_builder: SummaryPromptBuilder,
        model_selector: ModelSelector,
        invoker: ResilientInvoker,
        call_params: LLMCallParams | None = None,
        logger: FilteringBoundLogger | None = None,
    ):
        """
        Initialize conversation summarizer.

        :param prompt_builder: Builds the prompt and its sizing metrics
        :param model_selector: Picks the primary model from the metrics
        :param invoker: Calls the provider with retry and fallback
        :param call_params: Sampling settings for the summary call
        :param logger: Diagnostic sink, defaults to this module's structlog logger
        """
        self.prompt_builder = prompt_builder
        self.model_selector = model_selector
        self.invoker = invoker
        self.call_params = call_params or LLMCallParams()
        self.logger = logger or structlog.get_logger(__name__)

    async def summarize_conversation(
        self,
        conversation: Sequence[ChatMessage],
        language: str | None,
        organization: OrganizationProfile,
    ) -> str:
        """
        Condense a conversation into a short summary of the user's request.

        :param conversation: Chronological messages (not modified)
        :param language: Optional output language hint
        :param organization: Organization profile, its model override applies to the primary call
        :return: Summary text, possibly empty
        :raises AIProviderError: If every attempt of a model tier failed
        """
        context = self.prompt_builder.build(conversation, organization, language)
        self.logger.info(
            "summary_prompt",
            organization_id=organization.id,
            prompt=context.prompt[0]["content"] if context.prompt else "",
        )

        model = self.model_selector.select(
            context.num_past_messages_included,
            context.past_conv_token_count,
            organization.matching_step_model,
        )
        self.logger.info(
            "summary_model_selected",
            organization_id=organization.id,
            model=model,
            num_past_messages_included=context.num_past_messages_included,
            past_conv_token_count=context.past_conv_token_count,
        )

        return await self.invoker.invoke(context.prompt, self.call_params, model)
