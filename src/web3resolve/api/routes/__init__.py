"""API route modules."""

from web3resolve.api.routes.cache import router as cache_router
from web3resolve.api.routes.config import router as config_router
from web3resolve.api.routes.health import router as health_router
from web3resolve.api.routes.resolve import router as resolve_router

__all__ = [
    "cache_router",
    "config_router",
    "health_router",
    "resolve_router",
]
