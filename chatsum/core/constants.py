# Summary model tiers
DEFAULT_SUMMARY_CAPABLE_MODEL = "gpt-4"
DEFAULT_SUMMARY_FAST_MODEL = "gpt-4-0125-preview"
DEFAULT_SUMMARY_FALLBACK_MODEL = "gpt-3.5-turbo-0125"  # Fixed low-cost tier, ignores org overrides

# Capable tier is used from this much folded history on
DEFAULT_CAPABLE_MIN_PAST_MESSAGES = 5
DEFAULT_CAPABLE_MIN_TOKEN_COUNT = 100  # Strictly greater than

# Retry Configuration
DEFAULT_SUMMARY_MAX_ATTEMPTS = 3
DEFAULT_RETRY_BASE_DELAY_SECONDS = 1.0  # Delay before attempt n+1: base * 2^(n-1)
DEFAULT_RETRY_MAX_DELAY_SECONDS = 10.0

# Summary LLM call parameters
DEFAULT_SUMMARY_TEMPERATURE = 0.0
DEFAULT_SUMMARY_MAX_TOKENS = 512

# LLM call parameter limits
MIN_LLM_TEMPERATURE = 0.0
MAX_LLM_TEMPERATURE = 2.0
MIN_LLM_MAX_TOKENS = 1
MAX_LLM_MAX_TOKENS = 32000

# AI Provider Configuration
DEFAULT_PROVIDER_MODEL = DEFAULT_SUMMARY_FAST_MODEL
DEFAULT_GOOGLE_PROVIDER_MODEL = "gemini-1.5-flash"
DEFAULT_PROVIDER_TEMPERATURE = 0.7
DEFAULT_PROVIDER_MAX_TOKENS = 1024
GOOGLE_MODEL_PREFIX = "gemini"

# History folding for the summary prompt
DEFAULT_HISTORY_TOKEN_BUDGET = 2000
DEFAULT_MAX_PAST_MESSAGES = 20
DEFAULT_TOKEN_ENCODING = "cl100k_base"
