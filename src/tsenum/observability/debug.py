"""
Debug Mode — Tracing of canonicalization for development.

When enabled, every canonicalize call emits one diagnostic line and one
recorded event. Disabled by default.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from tsenum.observability.logging import get_logger

logger = get_logger("debug")


@dataclass
class CanonicalizationEvent:
    """
    One canonicalize call and the member it resolved to.
    """
    family: str
    label: str
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "family": self.family,
            "label": self.label,
            "timestamp": self.timestamp.isoformat(),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


class DebugRecorder:
    """
    Records canonicalization events.
    """

    def __init__(self, enabled: bool = False, log_to_console: bool = True):
        """
        Initialize debug recorder.

        Args:
            enabled: Whether to record events
            log_to_console: Emit the diagnostic line through logging
        """
        self.enabled = enabled
        self.log_to_console = log_to_console
        self._events: list[CanonicalizationEvent] = []

    def record_canonicalization(
        self,
        family: str,
        label: str,
    ) -> CanonicalizationEvent | None:
        """
        Record a canonicalize call.

        Returns the event if enabled, None otherwise.
        """
        if not self.enabled:
            return None

        event = CanonicalizationEvent(family=family, label=label)
        self._events.append(event)

        if self.log_to_console:
            logger.debug(
                f"canonicalize: value = {label}",
                extra={"extra_data": {"family": family, "label": label}},
            )

        return event

    def get_events(
        self,
        family: str | None = None,
        label: str | None = None,
    ) -> list[CanonicalizationEvent]:
        """Query recorded events."""
        events = self._events

        if family:
            events = [e for e in events if e.family == family]
        if label:
            events = [e for e in events if e.label == label]

        return list(events)

    def clear(self) -> None:
        """Clear recorded events."""
        self._events.clear()


# Global debug recorder
_recorder = DebugRecorder(enabled=False)


def enable_debug(log_to_console: bool = True) -> None:
    """Enable debug mode globally."""
    global _recorder
    _recorder = DebugRecorder(enabled=True, log_to_console=log_to_console)


def disable_debug() -> None:
    """Disable debug mode."""
    global _recorder
    _recorder = DebugRecorder(enabled=False)


def get_debug_recorder() -> DebugRecorder:
    """Get global debug recorder."""
    return _recorder


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return _recorder.enabled
