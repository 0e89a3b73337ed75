"""Shared test fixtures for all tests."""

from __future__ import annotations

import pytest

from web3resolve.config import Web3ResolveSettings
from web3resolve.resolution.base import ResolverConfig


# ============================================================================
# Clock Fixtures
# ============================================================================


class FakeClock:
    """Manually advanced clock for cache expiry tests (seconds)."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def resolver_config() -> ResolverConfig:
    """Create a resolver config for testing."""
    return ResolverConfig(
        api_key=None,
        batch_size=2,
        cache_max_size=100,
        cache_ttl_ms=60_000,
    )


@pytest.fixture
def mock_settings() -> Web3ResolveSettings:
    """Create mock settings for testing."""
    return Web3ResolveSettings(
        web3bio_api_key="test-web3bio-key",
        batch_size=2,
        cache_max_size=100,
        cache_ttl_ms=60_000,
        debug=True,
        log_level="DEBUG",
    )
