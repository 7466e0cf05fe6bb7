from chatsum.core.config import Settings, settings
from chatsum.core.logging import configure_logging
from chatsum.core.retry import retry_with_backoff

__all__ = [
    "Settings",
    "settings",
    "configure_logging",
    "retry_with_backoff",
]
