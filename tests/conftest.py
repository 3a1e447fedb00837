"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import pytest

from ttl_cache.cache.store import CacheStore


class FakeClock:
    """
    Manually advanced clock for deterministic expiration tests.

    Usage:
        clock = FakeClock()
        store = CacheStore(clock=clock)
        clock.advance(3)
    """

    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def advance(self, seconds: float) -> None:
        """Move the clock forward."""
        self.now += seconds

    def __call__(self) -> float:
        return self.now


# ============================================================================
# CacheStore Fixtures
# ============================================================================

@pytest.fixture
def store() -> CacheStore:
    """Create a fresh CacheStore using the real clock."""
    return CacheStore()


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock starting at a fixed instant."""
    return FakeClock()


@pytest.fixture
def timed_store(clock: FakeClock) -> CacheStore:
    """Create a CacheStore driven by the fake clock, with sweeping disabled."""
    return CacheStore(clock=clock, sweep_interval=0)


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
