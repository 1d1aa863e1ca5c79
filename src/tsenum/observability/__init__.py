"""
Observability — Logging, metrics, and debugging for tsenum.

Provides:
- Named loggers with readable and JSON formatters
- Counters for lookups, misses, and canonicalizations
- Debug mode tracing every canonicalize call
"""

from tsenum.observability.logging import (
    configure_logging,
    get_logger,
    JSONFormatter,
    ReadableFormatter,
)
from tsenum.observability.metrics import (
    Counter,
    EnumMetrics,
    get_metrics,
    reset_metrics,
)
from tsenum.observability.debug import (
    CanonicalizationEvent,
    DebugRecorder,
    enable_debug,
    disable_debug,
    get_debug_recorder,
    is_debug_enabled,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "JSONFormatter",
    "ReadableFormatter",
    # Metrics
    "Counter",
    "EnumMetrics",
    "get_metrics",
    "reset_metrics",
    # Debug
    "CanonicalizationEvent",
    "DebugRecorder",
    "enable_debug",
    "disable_debug",
    "get_debug_recorder",
    "is_debug_enabled",
]
