"""
Pytest configuration and shared fixtures.
"""

import logging

import matplotlib

matplotlib.use("Agg")

import pytest
import numpy as np
import structlog
from structlog.testing import capture_logs

# Keep engine run summaries out of test output
QUIET_LOGGER = structlog.make_filtering_bound_logger(logging.WARNING)
structlog.configure(wrapper_class=QUIET_LOGGER)


class UpperBoundSource:
    """Random source that always returns the top of the requested range."""

    def uniform(self, low, high):
        return high


class SequenceSource:
    """Random source replaying a fixed cycle of fractions of the range."""

    def __init__(self, fractions):
        self.fractions = list(fractions)
        self.calls = 0

    def uniform(self, low, high):
        u = self.fractions[self.calls % len(self.fractions)]
        self.calls += 1
        return low + u * (high - low)


@pytest.fixture
def small_config():
    """Configuration for a small 30x30 test population."""
    from islands.core import PopulationConfig
    return PopulationConfig(width=30, height=30, period=3.0, amplitude=100.0)


@pytest.fixture
def tiny_config():
    """The 2x2 configuration with period = amplitude = 1."""
    from islands.core import PopulationConfig
    return PopulationConfig(width=2, height=2, period=1.0, amplitude=1.0)


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)


@pytest.fixture
def upper_bound_source():
    return UpperBoundSource()


@pytest.fixture
def make_sequence_source():
    """Factory for sources replaying the same draws."""
    def _make(seed=7, length=997):
        fractions = np.random.default_rng(seed).random(length)
        return SequenceSource(fractions)
    return _make


@pytest.fixture
def debug_logs():
    """Structlog entries emitted while the fixture is active, debug included."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG))
    try:
        with capture_logs() as logs:
            yield logs
    finally:
        structlog.configure(wrapper_class=QUIET_LOGGER)
