"""
Unit test fixtures with mocked dependencies.

Unit tests should be:
- Fast (no real backoff sleeps, no network)
- Isolated (providers are AsyncMocks, token counting is stubbed)
- Deterministic (no flakiness)
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from chatsum.prompts.summary_prompt import SummaryPromptBuilder
from chatsum.services.summary.model_selector import ModelSelector
from chatsum.services.summary.resilient_invoker import ResilientInvoker

# ============================================================================
# Provider & Sink Fixtures
# ============================================================================


@pytest.fixture
def mock_ai_provider():
    """Create mock AI provider for testing."""
    return AsyncMock()


@pytest.fixture
def mock_sleep():
    """Awaitable sleep that records delays instead of waiting."""
    return AsyncMock()


@pytest.fixture
def mock_logger():
    """Injectable diagnostic sink."""
    return MagicMock()


# ============================================================================
# Pipeline Fixtures
# ============================================================================


@pytest.fixture
def word_count_builder():
    """Prompt builder counting one token per whitespace-separated word (no tiktoken download)."""
    return SummaryPromptBuilder(token_counter=lambda text: len(text.split()))


@pytest.fixture
def model_selector(sample_model_table):
    """Model selector with default thresholds (5 messages, 100 tokens)."""
    return ModelSelector(model_table=sample_model_table)


@pytest.fixture
def invoker(mock_ai_provider, mock_sleep, mock_logger, sample_model_table):
    """Resilient invoker over the mock provider with 3 attempts and 1s base delay."""
    return ResilientInvoker(
        ai_provider=mock_ai_provider,
        fallback_model=sample_model_table.fallback,
        max_attempts=3,
        base_delay=1.0,
        max_delay=10.0,
        sleep=mock_sleep,
        logger=mock_logger,
    )
