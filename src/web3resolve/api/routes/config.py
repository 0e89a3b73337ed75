"""Resolver configuration endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from web3resolve.api.dependencies import Engine
from web3resolve.api.schemas import ConfigResponse, ConfigUpdateRequest
from web3resolve.core.exceptions import ConfigurationError
from web3resolve.resolution.base import ResolverConfig

router = APIRouter(prefix="/config", tags=["config"])


def _convert_config(config: ResolverConfig) -> ConfigResponse:
    return ConfigResponse(
        has_api_key=bool(config.api_key),
        batch_size=config.batch_size,
        cache_max_size=config.cache_max_size,
        cache_ttl_ms=config.cache_ttl_ms,
    )


@router.get(
    "",
    response_model=ConfigResponse,
    operation_id="getConfig",
    summary="Current resolver configuration",
)
async def get_config(engine: Engine) -> ConfigResponse:
    return _convert_config(engine.get_config())


@router.patch(
    "",
    response_model=ConfigResponse,
    operation_id="updateConfig",
    summary="Update resolver configuration",
    description=(
        "Apply a partial update. Sending cacheMaxSize or cacheTtlMs rebuilds the "
        "cache and discards every cached result."
    ),
)
async def update_config(request: ConfigUpdateRequest, engine: Engine) -> ConfigResponse:
    changes = request.changes()
    # Explicit nulls mean "leave unchanged" for the required options
    changes = {k: v for k, v in changes.items() if v is not None or k == "api_key"}
    try:
        config = engine.configure(**changes)
    except ConfigurationError as e:
        raise HTTPException(status_code=422, detail=e.message) from e
    return _convert_config(config)
