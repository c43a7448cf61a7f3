# leutils/utils/__init__.py
"""

Does: Provide the lightweight, topic-gated debug tracer used across leutils.
Returns: Public API via debug/reload_topics/is_enabled.
Used by: The tokeniser and tests.
"""

from __future__ import annotations

from .log import (
    debug,
    is_enabled,
    reload_topics,
)

__all__ = [
    # Logging helpers
    "debug",
    "is_enabled",
    "reload_topics",
]
