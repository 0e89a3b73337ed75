"""Integration test fixtures for the HTTP API."""

from __future__ import annotations

from typing import AsyncIterator, ClassVar

import pytest
from httpx import ASGITransport, AsyncClient

from web3resolve.api.app import create_app
from web3resolve.config import Web3ResolveSettings
from web3resolve.core.models import ProviderRecord
from web3resolve.core.types import ResolutionStatus, SourceName
from web3resolve.resolution.base import AbstractResolver, FetchResult
from web3resolve.resolution.engine import ResolutionEngine

VITALIK_ADDRESS = "0xd8da6bf26964af9d7eed9e10e5458d3df0e5a8f6"
JESSE_ADDRESS = "0x849151d7d0bf1f34b70d5cad5149d28cc2308bf1"


# ============================================================================
# Resolver Fixtures
# ============================================================================


class FixedResolver(AbstractResolver):
    """Resolver answering from a fixed name table without network access."""

    SOURCE_NAME: ClassVar[SourceName] = SourceName.WEB3BIO
    BASE_URL: ClassVar[str] = "https://example.com"

    NAMES: ClassVar[dict[str, str]] = {
        "vitalik.eth": VITALIK_ADDRESS,
        "jesse.base.eth": JESSE_ADDRESS,
    }

    def __init__(self) -> None:
        super().__init__()
        self.calls = 0

    def _records(self, identifiers: list[str]) -> list[ProviderRecord]:
        return [
            ProviderRecord(identity=name, address=self.NAMES[name])
            for name in identifiers
            if name in self.NAMES
        ]

    async def fetch_single(self, identifier: str) -> FetchResult:
        self.calls += 1
        records = self._records([identifier])
        return FetchResult(
            status=ResolutionStatus.SUCCESS if records else ResolutionStatus.NOT_FOUND,
            records=records,
            source=self.source_name,
        )

    async def fetch_batch(self, identifiers: list[str]) -> FetchResult:
        self.calls += 1
        return FetchResult(
            status=ResolutionStatus.SUCCESS,
            records=self._records(identifiers),
            source=self.source_name,
        )


@pytest.fixture
def fixed_resolver() -> FixedResolver:
    return FixedResolver()


@pytest.fixture
def api_settings() -> Web3ResolveSettings:
    return Web3ResolveSettings(
        web3bio_api_key=None,
        batch_size=2,
        cache_max_size=100,
        cache_ttl_ms=60_000,
    )


@pytest.fixture
def engine(api_settings: Web3ResolveSettings, fixed_resolver: FixedResolver) -> ResolutionEngine:
    return ResolutionEngine(api_settings.resolver_config(), resolver=fixed_resolver)


# ============================================================================
# FastAPI Test Client Fixtures
# ============================================================================


@pytest.fixture
async def test_app(api_settings: Web3ResolveSettings, engine: ResolutionEngine):
    """Create test FastAPI application around a network-free engine."""
    app = create_app(api_settings, engine=engine)

    # ASGITransport does not run the lifespan, so install the engine directly
    app.state.engine = engine

    yield app

    await engine.close()


@pytest.fixture
async def test_client(test_app) -> AsyncIterator[AsyncClient]:
    """Create async HTTP test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
