"""Tests for metrics collection."""

import pytest

from families import Color
from tsenum import UnknownLabelError
from tsenum.observability import (
    Counter,
    EnumMetrics,
    get_metrics,
    reset_metrics,
)


class TestCounter:
    """Tests for Counter metric."""

    def test_starts_at_zero(self):
        """Counter starts at zero."""
        counter = Counter("test", "Test counter")
        assert counter.value == 0

    def test_increment(self):
        """Can increment counter."""
        counter = Counter("test", "Test counter")
        counter.inc()
        counter.inc(4)
        assert counter.value == 5

    def test_reset(self):
        """Can reset counter."""
        counter = Counter("test", "Test counter")
        counter.inc(10)
        counter.reset()
        assert counter.value == 0


class TestEnumMetrics:
    """Tests for the global metrics."""

    def test_to_dict(self):
        """Exports all counters."""
        metrics = EnumMetrics()
        metrics.lookups_total.inc(3)
        metrics.lookup_misses.inc()

        assert metrics.to_dict() == {
            "lookups": {"total": 3, "misses": 1},
            "canonicalizations": 0,
            "members_registered": 0,
        }

    def test_tracks_family_activity(self):
        """Lookups, misses and canonicalizations are counted."""
        Color.lookup("red")
        Color("green")
        Color.canonicalize("blue")
        with pytest.raises(UnknownLabelError):
            Color.lookup("purple")

        metrics = get_metrics()
        assert metrics.lookups_total.value == 4
        assert metrics.lookup_misses.value == 1
        assert metrics.canonicalizations.value == 1

    def test_reset_metrics(self):
        """reset_metrics() zeroes everything."""
        Color.lookup("red")
        reset_metrics()
        assert get_metrics().lookups_total.value == 0
