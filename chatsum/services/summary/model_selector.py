"""Model selection for conversation summaries."""

from chatsum.core.constants import DEFAULT_CAPABLE_MIN_PAST_MESSAGES, DEFAULT_CAPABLE_MIN_TOKEN_COUNT
from chatsum.schemas.summary_schemas import SummaryModelTable


class ModelSelector:
    """Picks the primary summary model before any network call is made."""

    def __init__(
        self,
        model_table: SummaryModelTable,
        capable_min_past_messages: int = DEFAULT_CAPABLE_MIN_PAST_MESSAGES,
        capable_min_token_count: int = DEFAULT_CAPABLE_MIN_TOKEN_COUNT,
    ):
        """
        :param model_table: Tier to model identifier mapping
        :param capable_min_past_messages: Folded turns from which the capable tier is used
        :param capable_min_token_count: Folded tokens above which the capable tier is used
        """
        self.model_table = model_table
        self.capable_min_past_messages = capable_min_past_messages
        self.capable_min_token_count = capable_min_token_count

    def use_capable_tier(self, num_past_messages_included: int, past_conv_token_count: int) -> bool:
        """Longer histories go to the capable tier."""
        return (
            num_past_messages_included >= self.capable_min_past_messages
            or past_conv_token_count > self.capable_min_token_count
        )

    def select(
        self,
        num_past_messages_included: int,
        past_conv_token_count: int,
        organization_model_override: str | None = None,
    ) -> str:
        """
        Select the model identifier for the primary call.

        Precedence:
        1. Non-empty organization override, returned verbatim
        2. Capable tier if the folded history is long enough
        3. Fast tier otherwise

        :param num_past_messages_included: Prior turns folded into the prompt
        :param past_conv_token_count: Approximate token size of those turns
        :param organization_model_override: Model pinned by the organization, if any
        :return: Model identifier
        """
        if organization_model_override:
            return organization_model_override

        if self.use_capable_tier(num_past_messages_included, past_conv_token_count):
            return self.model_table.capable
        return self.model_table.fast
