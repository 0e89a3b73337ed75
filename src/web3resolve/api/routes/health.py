"""Health check endpoints."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Request

from web3resolve import __version__
from web3resolve.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check the health status of the API and its resolution engine.",
)
async def health_check(request: Request) -> HealthResponse:
    """Check API health status."""
    services: dict[str, Literal["up", "down", "unknown"]] = {}

    # Upstream reachability is not probed; failures surface as unresolved results
    engine = getattr(request.app.state, "engine", None)
    services["engine"] = "up" if engine is not None else "down"
    services["web3bio"] = "unknown"

    return HealthResponse(
        status="healthy" if engine is not None else "unhealthy",
        version=__version__,
        services=services,
    )


@router.get(
    "/ready",
    operation_id="getReady",
    summary="Readiness check",
    description="Check if the API is ready to serve traffic.",
)
async def readiness_check(request: Request) -> dict[str, bool]:
    """Check if API is ready to serve traffic."""
    return {"ready": getattr(request.app.state, "engine", None) is not None}
