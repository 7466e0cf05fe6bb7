from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from chatsum.core.constants import (
    DEFAULT_SUMMARY_MAX_TOKENS,
    DEFAULT_SUMMARY_TEMPERATURE,
    MAX_LLM_MAX_TOKENS,
    MAX_LLM_TEMPERATURE,
    MIN_LLM_MAX_TOKENS,
    MIN_LLM_TEMPERATURE,
)

MessageRole = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    """Single conversation turn. A conversation is a chronological list of these."""

    model_config = ConfigDict(frozen=True)

    role: MessageRole = Field(description="Message author role")
    content: str = Field(description="Message text")


class OrganizationProfile(BaseModel):
    """Read-only organization configuration relevant to summarization."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str = ""
    matching_step_model: str | None = Field(None, description="Model pinned for this organization (primary call only)")


class PromptContext(BaseModel):
    """Prompt plus sizing metrics of the history folded into it."""

    prompt: list[dict[str, str]] = Field(description="Role/content pairs ready for the provider")
    num_past_messages_included: int = Field(ge=0, description="Prior turns folded into the prompt")
    past_conv_token_count: int = Field(ge=0, description="Approximate token size of the folded turns")


class LLMCallParams(BaseModel):
    """Sampling settings forwarded unchanged to the provider."""

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(DEFAULT_SUMMARY_TEMPERATURE, ge=MIN_LLM_TEMPERATURE, le=MAX_LLM_TEMPERATURE)
    max_tokens: int = Field(DEFAULT_SUMMARY_MAX_TOKENS, ge=MIN_LLM_MAX_TOKENS, le=MAX_LLM_MAX_TOKENS)


class SummaryModelTable(BaseModel):
    """Tier to model identifier mapping used by selection and fallback."""

    model_config = ConfigDict(frozen=True)

    capable: str = Field(min_length=1, description="Capable/expensive tier for longer histories")
    fast: str = Field(min_length=1, description="Fast/cheap tier for short histories")
    fallback: str = Field(min_length=1, description="Fixed low-cost tier used when the primary result is empty")
