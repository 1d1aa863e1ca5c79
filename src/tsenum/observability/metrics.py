"""
Metrics — Simple counters for registry activity.

Tracks how often families are queried and how often lookups miss.
"""

from dataclasses import dataclass, field
from threading import Lock
from typing import Any


class Counter:
    """Monotonically increasing counter."""

    def __init__(self, name: str, description: str = ""):
        self.name = name
        self.description = description
        self._value = 0
        self._lock = Lock()

    def inc(self, amount: int = 1) -> None:
        """Increment counter."""
        with self._lock:
            self._value += amount

    @property
    def value(self) -> int:
        return self._value

    def reset(self) -> None:
        """Reset counter (for testing)."""
        with self._lock:
            self._value = 0


@dataclass
class EnumMetrics:
    """
    Process-wide counters for all enumeration families.
    """
    lookups_total: Counter = field(
        default_factory=lambda: Counter("lookups_total", "Label lookups")
    )
    lookup_misses: Counter = field(
        default_factory=lambda: Counter("lookup_misses", "Lookups for unknown labels")
    )
    canonicalizations: Counter = field(
        default_factory=lambda: Counter("canonicalizations", "Canonicalize calls")
    )
    members_registered: Counter = field(
        default_factory=lambda: Counter("members_registered", "Members registered")
    )

    def to_dict(self) -> dict[str, Any]:
        """Export all metrics as dict."""
        return {
            "lookups": {
                "total": self.lookups_total.value,
                "misses": self.lookup_misses.value,
            },
            "canonicalizations": self.canonicalizations.value,
            "members_registered": self.members_registered.value,
        }

    def reset(self) -> None:
        """Reset all metrics (for testing)."""
        self.lookups_total.reset()
        self.lookup_misses.reset()
        self.canonicalizations.reset()
        self.members_registered.reset()


# Global metrics instance
_metrics = EnumMetrics()


def get_metrics() -> EnumMetrics:
    """Get global metrics registry."""
    return _metrics


def reset_metrics() -> None:
    """Reset global metrics (for testing)."""
    _metrics.reset()
