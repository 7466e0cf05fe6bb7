"""
Service interfaces for dependency injection.

This module defines abstract interfaces for all external dependencies
and services, enabling clean dependency injection and easy testing.
"""

from chatsum.interfaces.ai_provider import AIProviderError, IAIProvider, ProviderConfigurationError

__all__ = [
    "IAIProvider",
    "AIProviderError",
    "ProviderConfigurationError",
]
