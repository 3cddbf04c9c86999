"""Bundled catalog of debugging patterns, in display order."""

from .patterns import (
    API_INTEGRATION,
    ASYNC_PROMISE_HELL,
    MEMORY_LEAKS,
    PERFORMANCE_BOTTLENECK,
    STACK_TRACE,
    STATE_MANAGEMENT,
)

DEFAULT_PATTERNS = (
    ASYNC_PROMISE_HELL,
    MEMORY_LEAKS,
    API_INTEGRATION,
    STATE_MANAGEMENT,
    PERFORMANCE_BOTTLENECK,
    STACK_TRACE,
)

# Diagrams for these patterns are loaded eagerly on the list page
PRIORITY_PATTERN_IDS = frozenset(
    [
        "async-promise-hell",
        "memory-leaks",
        "api-integration",
        "state-management",
        "performance-bottleneck",
        "stack-trace",
    ]
)

__all__ = ["DEFAULT_PATTERNS", "PRIORITY_PATTERN_IDS"]
