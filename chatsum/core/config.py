from pydantic_settings import BaseSettings, SettingsConfigDict

from chatsum.core.constants import (
    DEFAULT_CAPABLE_MIN_PAST_MESSAGES,
    DEFAULT_CAPABLE_MIN_TOKEN_COUNT,
    DEFAULT_HISTORY_TOKEN_BUDGET,
    DEFAULT_MAX_PAST_MESSAGES,
    DEFAULT_RETRY_BASE_DELAY_SECONDS,
    DEFAULT_RETRY_MAX_DELAY_SECONDS,
    DEFAULT_SUMMARY_CAPABLE_MODEL,
    DEFAULT_SUMMARY_FALLBACK_MODEL,
    DEFAULT_SUMMARY_FAST_MODEL,
    DEFAULT_SUMMARY_MAX_ATTEMPTS,
    DEFAULT_SUMMARY_MAX_TOKENS,
    DEFAULT_SUMMARY_TEMPERATURE,
)


class Settings(BaseSettings):
    """Application settings"""

    debug: bool = False

    openai_api_key: str | None = None
    openai_base_url: str | None = None  # OpenAI-compatible gateway, e.g. a self-hosted proxy
    google_api_key: str | None = None

    # Summary model tiers (tier -> model identifier)
    summary_capable_model: str = DEFAULT_SUMMARY_CAPABLE_MODEL
    summary_fast_model: str = DEFAULT_SUMMARY_FAST_MODEL
    summary_fallback_model: str = DEFAULT_SUMMARY_FALLBACK_MODEL

    # Model selection thresholds
    summary_capable_min_past_messages: int = DEFAULT_CAPABLE_MIN_PAST_MESSAGES
    summary_capable_min_token_count: int = DEFAULT_CAPABLE_MIN_TOKEN_COUNT

    # Retry policy (per model tier)
    summary_max_attempts: int = DEFAULT_SUMMARY_MAX_ATTEMPTS
    summary_retry_base_delay: float = DEFAULT_RETRY_BASE_DELAY_SECONDS
    summary_retry_max_delay: float = DEFAULT_RETRY_MAX_DELAY_SECONDS

    # LLM call parameters for summaries
    summary_temperature: float = DEFAULT_SUMMARY_TEMPERATURE
    summary_max_tokens: int = DEFAULT_SUMMARY_MAX_TOKENS

    # Prompt history folding
    summary_history_token_budget: int = DEFAULT_HISTORY_TOKEN_BUDGET
    summary_max_past_messages: int = DEFAULT_MAX_PAST_MESSAGES

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    @property
    def is_ai_available(self) -> bool:
        """Check if at least one LLM provider is configured."""
        return self.openai_api_key is not None or self.google_api_key is not None


settings = Settings()
