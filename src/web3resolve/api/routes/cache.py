"""Cache management endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from web3resolve.api.dependencies import Engine
from web3resolve.api.schemas import CacheStatsResponse, EvictResponse

router = APIRouter(prefix="/cache", tags=["cache"])


@router.get(
    "/stats",
    response_model=CacheStatsResponse,
    operation_id="getCacheStats",
    summary="Cache statistics",
)
async def get_cache_stats(engine: Engine) -> CacheStatsResponse:
    stats = engine.cache_stats()
    return CacheStatsResponse(size=stats.size, max_size=stats.max_size)


@router.delete(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    operation_id="clearCache",
    summary="Clear the cache",
)
async def clear_cache(engine: Engine) -> None:
    engine.clear_cache()


@router.delete(
    "/{key}",
    response_model=EvictResponse,
    operation_id="evictCacheEntry",
    summary="Evict one cached result",
    description="Remove the cached result for an identifier so the next lookup goes upstream.",
)
async def evict_cache_entry(key: str, engine: Engine) -> EvictResponse:
    return EvictResponse(key=key, evicted=engine.evict(key))
