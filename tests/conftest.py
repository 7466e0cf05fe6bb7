"""
Global test configuration and fixtures.

This module contains ONLY global, test-agnostic fixtures that are shared
across ALL test types.

Test-specific fixtures are located in their respective conftest.py files:
- tests/unit/conftest.py - Unit test fixtures (mocked providers, stub token counters)
- tests/integration/    - Real tiktoken encoder, no network providers
"""

import pytest

from chatsum.schemas.summary_schemas import ChatMessage, OrganizationProfile, SummaryModelTable

# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_organization_data():
    """Standard organization profile data for all test types."""
    return {
        "id": 1,
        "name": "Acme Support",
        "description": "Customer support for Acme hardware products",
        "matching_step_model": None,
    }


@pytest.fixture
def sample_organization(sample_organization_data):
    """Organization profile without a model override."""
    return OrganizationProfile(**sample_organization_data)


@pytest.fixture
def sample_model_table():
    """Tier table with recognizable identifiers."""
    return SummaryModelTable(capable="capable-model", fast="fast-model", fallback="fallback-model")


@pytest.fixture
def make_conversation():
    """Build a conversation with `past_turns` alternating turns before the latest user message."""

    def _make(past_turns: int, latest: str = "Can you help me reset my router?") -> list[ChatMessage]:
        messages = []
        for i in range(past_turns):
            role = "user" if i % 2 == 0 else "assistant"
            messages.append(ChatMessage(role=role, content=f"turn {i}"))
        messages.append(ChatMessage(role="user", content=latest))
        return messages

    return _make


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """
    Configure pytest with custom markers.

    Markers are also declared in pyproject.toml; registering them here keeps
    IDE support working when tests are run from a single file.
    """
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies (fast)")
    config.addinivalue_line("markers", "integration: Integration tests against real providers (slow)")


def pytest_collection_modifyitems(config, items):
    """
    Auto-mark tests based on their file location.

    This ensures tests are properly categorized even if developers
    forget to add the @pytest.mark.xxx decorator.
    """
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
