"""Resolution endpoints."""

from __future__ import annotations

import time

from fastapi import APIRouter, Query

from web3resolve.api.dependencies import Engine
from web3resolve.api.schemas import (
    DetectResponse,
    ResolutionResponse,
    ResolveBatchRequest,
    ResolveBatchResponse,
)
from web3resolve.core.models import ResolutionResult

router = APIRouter(prefix="/resolve", tags=["resolve"])


def _convert_result(query: str, result: ResolutionResult) -> ResolutionResponse:
    """Convert a domain ResolutionResult to an API response."""
    return ResolutionResponse(
        input=query,
        address=result.address,
        platform=result.platform,
        display_name=result.display_name,
        resolved=result.resolved,
    )


@router.post(
    "/batch",
    response_model=ResolveBatchResponse,
    operation_id="resolveBatch",
    summary="Resolve several identifiers",
    description=(
        "Resolve addresses, ENS names and Base names in one call. Results keep the "
        "order of the inputs, duplicates included."
    ),
)
async def resolve_batch(
    request: ResolveBatchRequest,
    engine: Engine,
) -> ResolveBatchResponse:
    start_time = time.monotonic()

    results = await engine.resolve_many(request.inputs)

    return ResolveBatchResponse(
        results=[
            _convert_result(query, result) for query, result in zip(request.inputs, results)
        ],
        duration_ms=(time.monotonic() - start_time) * 1000,
    )


@router.post(
    "/detect",
    response_model=DetectResponse,
    operation_id="detectInputType",
    summary="Detect identifier type",
    description="Classify an identifier as an address, ENS name, Base name or unknown.",
)
async def detect_input_type(
    engine: Engine,
    query: str = Query(..., min_length=1, max_length=512, description="Identifier to classify"),
) -> DetectResponse:
    detection = engine.detect(query)
    return DetectResponse(
        query=query,
        normalized_value=detection.normalized_value,
        detected_type=detection.input_type,
        platform=detection.platform,
    )


@router.get(
    "/{identifier}",
    response_model=ResolutionResponse,
    operation_id="resolveIdentifier",
    summary="Resolve one identifier",
    description=(
        "Resolve an address, ENS name or Base name. Unresolvable input returns 200 "
        "with a null address."
    ),
)
async def resolve_identifier(identifier: str, engine: Engine) -> ResolutionResponse:
    result = await engine.resolve(identifier)
    return _convert_result(identifier, result)
