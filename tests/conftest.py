"""
Shared fixtures.
"""

import logging

import pytest

from tsenum.observability import disable_debug, reset_metrics


@pytest.fixture(autouse=True)
def clean_observability():
    """Reset metrics, debug mode and the tsenum logger around each test."""
    reset_metrics()
    disable_debug()
    yield
    reset_metrics()
    disable_debug()
    root = logging.getLogger("tsenum")
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    root.propagate = True
