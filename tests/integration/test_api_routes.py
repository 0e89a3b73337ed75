"""Integration tests for API routes."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

VITALIK_ADDRESS = "0xd8da6bf26964af9d7eed9e10e5458d3df0e5a8f6"
JESSE_ADDRESS = "0x849151d7d0bf1f34b70d5cad5149d28cc2308bf1"

pytestmark = [pytest.mark.integration]


# ============================================================================
# Health Check Tests
# ============================================================================


class TestHealthEndpoint:
    """Tests for the /api/v1/health endpoint."""

    async def test_health_returns_200(self, test_client: AsyncClient):
        response = await test_client.get("/api/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["services"]["engine"] == "up"

    async def test_health_includes_version(self, test_client: AsyncClient):
        response = await test_client.get("/api/v1/health")

        assert isinstance(response.json()["version"], str)


class TestReadinessEndpoint:
    """Tests for the /api/v1/ready endpoint."""

    async def test_ready(self, test_client: AsyncClient):
        response = await test_client.get("/api/v1/ready")

        assert response.status_code == 200
        assert response.json() == {"ready": True}


# ============================================================================
# Resolve Endpoint Tests
# ============================================================================


class TestResolveEndpoint:
    """Tests for GET /api/v1/resolve/{identifier}."""

    async def test_resolve_ens(self, test_client: AsyncClient):
        response = await test_client.get("/api/v1/resolve/Vitalik.eth")

        assert response.status_code == 200
        assert response.json() == {
            "input": "Vitalik.eth",
            "address": VITALIK_ADDRESS,
            "platform": "ens",
            "displayName": "vitalik.eth",
            "resolved": True,
        }

    async def test_resolve_base_name(self, test_client: AsyncClient):
        response = await test_client.get("/api/v1/resolve/jesse.base.eth")

        data = response.json()
        assert data["platform"] == "basenames"
        assert data["address"] == JESSE_ADDRESS

    async def test_resolve_address(self, test_client: AsyncClient, fixed_resolver):
        response = await test_client.get(
            "/api/v1/resolve/0xABCDEF1234567890ABCDEF1234567890ABCDEF12"
        )

        data = response.json()
        assert data["address"] == "0xabcdef1234567890abcdef1234567890abcdef12"
        assert data["platform"] == "ethereum"
        assert data["displayName"] is None
        assert fixed_resolver.calls == 0

    async def test_unresolved_returns_200(self, test_client: AsyncClient):
        response = await test_client.get("/api/v1/resolve/ghost.base.eth")

        assert response.status_code == 200
        data = response.json()
        assert data["resolved"] is False
        assert data["address"] is None
        assert data["platform"] is None

    async def test_second_lookup_is_cached(self, test_client: AsyncClient, fixed_resolver):
        await test_client.get("/api/v1/resolve/vitalik.eth")
        await test_client.get("/api/v1/resolve/vitalik.eth")

        assert fixed_resolver.calls == 1


class TestResolveBatchEndpoint:
    """Tests for POST /api/v1/resolve/batch."""

    async def test_order_and_duplicates(self, test_client: AsyncClient, fixed_resolver):
        inputs = ["vitalik.eth", "nobody.eth", "jesse.base.eth", "vitalik.eth", "junk"]

        response = await test_client.post("/api/v1/resolve/batch", json={"inputs": inputs})

        assert response.status_code == 200
        data = response.json()
        assert [r["input"] for r in data["results"]] == inputs
        assert [r["address"] for r in data["results"]] == [
            VITALIK_ADDRESS,
            None,
            JESSE_ADDRESS,
            VITALIK_ADDRESS,
            None,
        ]
        assert "durationMs" in data
        # Three distinct names in batches of two
        assert fixed_resolver.calls == 2

    async def test_empty_inputs_rejected(self, test_client: AsyncClient):
        response = await test_client.post("/api/v1/resolve/batch", json={"inputs": []})

        assert response.status_code == 422

    async def test_missing_inputs_rejected(self, test_client: AsyncClient):
        response = await test_client.post("/api/v1/resolve/batch", json={})

        assert response.status_code == 422


class TestDetectEndpoint:
    """Tests for POST /api/v1/resolve/detect."""

    @pytest.mark.parametrize(
        "query,detected_type,platform",
        [
            ("vitalik.eth", "ens", "ens"),
            ("jesse.base.eth", "basename", "basenames"),
            ("0xd8da6bf26964af9d7eed9e10e5458d3df0e5a8f6", "address", "ethereum"),
            ("hello", "unknown", None),
        ],
    )
    async def test_detect(
        self, test_client: AsyncClient, query: str, detected_type: str, platform: str | None
    ):
        response = await test_client.post("/api/v1/resolve/detect", params={"query": query})

        assert response.status_code == 200
        data = response.json()
        assert data["detectedType"] == detected_type
        assert data["platform"] == platform

    async def test_detect_normalizes(self, test_client: AsyncClient):
        response = await test_client.post(
            "/api/v1/resolve/detect", params={"query": "  Vitalik.ETH "}
        )

        assert response.json()["normalizedValue"] == "vitalik.eth"

    async def test_detect_requires_query(self, test_client: AsyncClient):
        response = await test_client.post("/api/v1/resolve/detect")

        assert response.status_code == 422


# ============================================================================
# Cache Endpoint Tests
# ============================================================================


class TestCacheEndpoints:
    """Tests for /api/v1/cache."""

    async def test_stats(self, test_client: AsyncClient):
        await test_client.get("/api/v1/resolve/vitalik.eth")

        response = await test_client.get("/api/v1/cache/stats")

        assert response.status_code == 200
        assert response.json() == {"size": 1, "maxSize": 100}

    async def test_clear(self, test_client: AsyncClient):
        await test_client.get("/api/v1/resolve/vitalik.eth")

        response = await test_client.delete("/api/v1/cache")

        assert response.status_code == 204
        stats = (await test_client.get("/api/v1/cache/stats")).json()
        assert stats["size"] == 0

    async def test_evict(self, test_client: AsyncClient):
        await test_client.get("/api/v1/resolve/vitalik.eth")

        first = await test_client.delete("/api/v1/cache/Vitalik.eth")
        second = await test_client.delete("/api/v1/cache/Vitalik.eth")

        assert first.json() == {"key": "Vitalik.eth", "evicted": True}
        assert second.json()["evicted"] is False


# ============================================================================
# Config Endpoint Tests
# ============================================================================


class TestConfigEndpoints:
    """Tests for /api/v1/config."""

    async def test_get_config(self, test_client: AsyncClient):
        response = await test_client.get("/api/v1/config")

        assert response.status_code == 200
        assert response.json() == {
            "hasApiKey": False,
            "batchSize": 2,
            "cacheMaxSize": 100,
            "cacheTtlMs": 60_000,
        }

    async def test_patch_partial(self, test_client: AsyncClient):
        response = await test_client.patch("/api/v1/config", json={"batchSize": 10})

        assert response.status_code == 200
        data = response.json()
        assert data["batchSize"] == 10
        assert data["cacheMaxSize"] == 100

    async def test_api_key_never_echoed(self, test_client: AsyncClient):
        response = await test_client.patch("/api/v1/config", json={"apiKey": "secret"})

        assert response.json()["hasApiKey"] is True
        assert "secret" not in response.text

    async def test_cache_option_clears_cache(self, test_client: AsyncClient):
        await test_client.get("/api/v1/resolve/vitalik.eth")

        await test_client.patch("/api/v1/config", json={"cacheMaxSize": 5})

        stats = (await test_client.get("/api/v1/cache/stats")).json()
        assert stats == {"size": 0, "maxSize": 5}

    async def test_api_key_change_keeps_cache(self, test_client: AsyncClient):
        await test_client.get("/api/v1/resolve/vitalik.eth")

        await test_client.patch("/api/v1/config", json={"apiKey": "k"})

        stats = (await test_client.get("/api/v1/cache/stats")).json()
        assert stats["size"] == 1

    @pytest.mark.parametrize(
        "body",
        [{"batchSize": 0}, {"cacheMaxSize": -1}, {"cacheTtlMs": -1}],
    )
    async def test_invalid_values_rejected(self, test_client: AsyncClient, body: dict):
        response = await test_client.patch("/api/v1/config", json=body)

        assert response.status_code == 422
        config = (await test_client.get("/api/v1/config")).json()
        assert config["batchSize"] == 2


# ============================================================================
# Lifespan Tests
# ============================================================================


class TestLifespan:
    """The application builds its engine at startup."""

    async def test_engine_built_from_settings(self, api_settings):
        from web3resolve.api.app import create_app
        from web3resolve.resolution.engine import ResolutionEngine

        app = create_app(api_settings)

        async with app.router.lifespan_context(app):
            engine = app.state.engine
            assert isinstance(engine, ResolutionEngine)
            assert engine.get_config().batch_size == 2
