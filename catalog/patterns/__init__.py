"""Individual debugging pattern definitions."""

from .api_integration import API_INTEGRATION
from .async_promise_hell import ASYNC_PROMISE_HELL
from .memory_leaks import MEMORY_LEAKS
from .performance_bottleneck import PERFORMANCE_BOTTLENECK
from .stack_trace import STACK_TRACE
from .state_management import STATE_MANAGEMENT

__all__ = [
    "API_INTEGRATION",
    "ASYNC_PROMISE_HELL",
    "MEMORY_LEAKS",
    "PERFORMANCE_BOTTLENECK",
    "STACK_TRACE",
    "STATE_MANAGEMENT",
]
