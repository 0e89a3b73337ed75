"""Request schemas for API endpoints."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from web3resolve.api.schemas.base import APIBaseSchema


class ResolveBatchRequest(APIBaseSchema):
    """Request to resolve several identifiers at once."""

    inputs: Annotated[
        list[Annotated[str, Field(max_length=512)]],
        Field(
            min_length=1,
            max_length=1000,
            description="Addresses, ENS names or Base names; duplicates are allowed.",
        ),
    ]


class ConfigUpdateRequest(APIBaseSchema):
    """Partial resolver configuration update. Omitted fields are left unchanged."""

    api_key: Annotated[
        str | None,
        Field(default=None, description="web3.bio API key; empty string removes it."),
    ]
    batch_size: Annotated[
        int | None,
        Field(default=None, gt=0, description="Maximum names per batch request."),
    ]
    cache_max_size: Annotated[
        int | None,
        Field(default=None, gt=0, description="Maximum cached results. Changing it clears the cache."),
    ]
    cache_ttl_ms: Annotated[
        int | None,
        Field(default=None, ge=0, description="Result lifetime in ms. Changing it clears the cache."),
    ]

    def changes(self) -> dict[str, object]:
        """Fields explicitly sent by the client, keyed by option name."""
        return self.model_dump(exclude_unset=True, by_alias=False)
