"""Domain models for name resolution."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .types import Platform


class ResolutionResult(BaseModel):
    """
    Result of resolving one identifier.

    A result without an address is a "confirmed unresolved" outcome: the
    identifier was looked up (or could not be looked up) and is cached as such.
    It is not an error.
    """

    model_config = ConfigDict(frozen=True)

    address: str | None = Field(default=None, description="Lowercase 0x-prefixed address")
    platform: Platform | None = Field(default=None, description="Where the address came from")
    display_name: str | None = Field(
        default=None, description="Normalized name, set only when a name resolved"
    )

    @model_validator(mode="after")
    def check_address_platform(self) -> Self:
        """Address and platform are either both set or both absent."""
        if (self.address is None) != (self.platform is None):
            raise ValueError("address and platform must be set together")
        return self

    @classmethod
    def unresolved(cls) -> ResolutionResult:
        """A confirmed-unresolved result."""
        return cls()

    @property
    def resolved(self) -> bool:
        return self.address is not None


class ProviderRecord(BaseModel):
    """
    One record of a web3.bio ``/ns`` response.

    Only the fields used for correlation are kept; profile data such as
    ``displayName`` or ``avatar`` is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    address: str | None = None
    identity: str | None = None
