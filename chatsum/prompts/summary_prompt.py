"""
Summary Prompt Builder.

Turns a conversation and organization profile into a single system prompt asking
the model to condense the user's latest request, folding in as much recent
history as fits the token budget. The builder also reports how much history was
folded, which drives model selection.
"""

from collections.abc import Callable, Sequence
from functools import lru_cache

import structlog
import tiktoken

from chatsum.core.constants import DEFAULT_HISTORY_TOKEN_BUDGET, DEFAULT_MAX_PAST_MESSAGES, DEFAULT_TOKEN_ENCODING
from chatsum.schemas.summary_schemas import ChatMessage, OrganizationProfile, PromptContext

logger = structlog.get_logger(__name__)

ROLE_LABELS = {"user": "User", "assistant": "Assistant"}


@lru_cache(maxsize=4)
def _get_encoding(encoding_name: str) -> tiktoken.Encoding:
    return tiktoken.get_encoding(encoding_name)


def count_tokens(text: str, encoding_name: str = DEFAULT_TOKEN_ENCODING) -> int:
    """
    Count tokens in text with a tiktoken encoding.

    :param text: Text to measure
    :param encoding_name: tiktoken encoding (cl100k_base matches the GPT-4 family)
    :return: Token count
    """
    return len(_get_encoding(encoding_name).encode(text))


def build_summary_instructions(
    organization_name: str,
    organization_description: str,
    history: str,
    latest_message: str,
    language: str | None = None,
) -> str:
    """
    Build complete system prompt from its components.

    :param organization_name: Organization the assistant works for
    :param organization_description: What the organization does
    :param history: Rendered prior turns ("User: ..." lines), may be empty
    :param latest_message: The message to summarize
    :param language: Optional output language hint
    :return: Complete system prompt ready for use
    """
    history_block = history if history else "(no earlier messages)"
    language_line = f"\n- Write the summary in {language}" if language else ""

    return f"""You summarize what a user is asking an AI assistant for.

The assistant works for {organization_name}.
About {organization_name}: {organization_description or "(no description)"}

PREVIOUS CONVERSATION:
{history_block}

LATEST USER MESSAGE:
{latest_message}

INSTRUCTIONS:
- Summarize the user's current request in one or two sentences
- Resolve references to earlier messages so the summary stands on its own
- Only output the summary, no preamble{language_line}
"""


class SummaryPromptBuilder:
    """Builds the summary prompt and its history sizing metrics."""

    def __init__(
        self,
        history_token_budget: int = DEFAULT_HISTORY_TOKEN_BUDGET,
        max_past_messages: int = DEFAULT_MAX_PAST_MESSAGES,
        token_counter: Callable[[str], int] | None = None,
    ):
        """
        Initialize summary prompt builder.

        :param history_token_budget: Maximum tokens of prior turns folded into the prompt
        :param max_past_messages: Maximum number of prior turns folded into the prompt
        :param token_counter: Function returning the token count of a string (tiktoken by default)
        """
        self.history_token_budget = history_token_budget
        self.max_past_messages = max_past_messages
        self.token_counter = token_counter or count_tokens

    def build(
        self,
        conversation: Sequence[ChatMessage],
        organization: OrganizationProfile,
        language: str | None = None,
    ) -> PromptContext:
        """
        Build prompt context for a conversation.

        The last message is the request being summarized; earlier user/assistant
        turns are folded in newest-first until either limit is reached, then
        rendered chronologically. System turns are never folded.

        :param conversation: Chronological conversation (not modified)
        :param organization: Organization profile
        :param language: Optional output language hint
        :return: Prompt with folded-turn count and folded token count
        """
        latest_message = conversation[-1].content if conversation else ""
        past_messages = conversation[:-1]

        folded: list[str] = []
        token_count = 0
        for msg in reversed(past_messages):
            if msg.role not in ROLE_LABELS:
                continue
            if len(folded) >= self.max_past_messages:
                break

            line = f"{ROLE_LABELS[msg.role]}: {msg.content}"
            line_tokens = self.token_counter(line)
            if token_count + line_tokens > self.history_token_budget:
                break

            folded.append(line)
            token_count += line_tokens

        folded.reverse()

        instructions = build_summary_instructions(
            organization_name=organization.name,
            organization_description=organization.description,
            history="\n".join(folded),
            latest_message=latest_message,
            language=language,
        )

        logger.debug(
            "summary_prompt_built",
            organization_id=organization.id,
            message_count=len(conversation),
            num_past_messages_included=len(folded),
            past_conv_token_count=token_count,
        )

        return PromptContext(
            prompt=[{"role": "system", "content": instructions}],
            num_past_messages_included=len(folded),
            past_conv_token_count=token_count,
        )
