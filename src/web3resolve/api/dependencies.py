"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from web3resolve.resolution.engine import ResolutionEngine


async def get_engine(request: Request) -> ResolutionEngine:
    """Get the process-wide resolution engine from app state."""
    return request.app.state.engine


# Type alias for cleaner dependency injection
Engine = Annotated[ResolutionEngine, Depends(get_engine)]
