"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest
import respx
from httpx import Response


# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


def _requested_batch(request: httpx.Request) -> list[str]:
    """Decode the identifier list from a ``/ns/batch/{json}`` request."""
    return json.loads(request.url.path.removeprefix("/ns/batch/"))


def _profile(identity: str, address: str | None, platform: str = "ens") -> dict[str, Any]:
    """A web3.bio profile record as returned by /ns endpoints."""
    return {
        "address": address,
        "identity": identity,
        "platform": platform,
        "displayName": identity,
        "avatar": None,
        "description": None,
    }


def _batch_responder(addresses: dict[str, str]) -> Callable[[httpx.Request], Response]:
    """Build a respx side effect answering batch requests from a name→address map.

    Names not in the map are omitted from the response, as web3.bio does.
    """

    def _respond(request: httpx.Request) -> Response:
        names = _requested_batch(request)
        return Response(
            200,
            json=[_profile(name, addresses[name]) for name in names if name in addresses],
        )

    return _respond


# ============================================================================
# Mock Response Helpers
# ============================================================================


def mock_json_response(data: Any, status_code: int = 200) -> Response:
    """Create a mock JSON response."""
    return Response(
        status_code=status_code,
        json=data,
        headers={"Content-Type": "application/json"},
    )


def mock_error_response(status_code: int, message: str = "Error") -> Response:
    """Create a mock error response."""
    return Response(
        status_code=status_code,
        json={"error": message},
        headers={"Content-Type": "application/json"},
    )


@pytest.fixture
def mock_responses():
    """Provide helper functions for creating mock responses."""
    return {
        "json": mock_json_response,
        "error": mock_error_response,
    }


# ============================================================================
# web3.bio Fixtures
# ============================================================================


@pytest.fixture
def requested_batch() -> Callable[[httpx.Request], list[str]]:
    """Decoder for the identifier list of a recorded batch request."""
    return _requested_batch


@pytest.fixture
def profile() -> Callable[..., dict[str, Any]]:
    """Factory for web3.bio profile records."""
    return _profile


@pytest.fixture
def batch_responder() -> Callable[[dict[str, str]], Callable[[httpx.Request], Response]]:
    """Factory for respx side effects that answer batch lookups."""
    return _batch_responder
