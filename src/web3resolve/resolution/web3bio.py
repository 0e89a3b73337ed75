"""web3.bio name service resolver implementation."""

from __future__ import annotations

import json
import logging
import time
from typing import Any, ClassVar
from urllib.parse import quote

from pydantic import ValidationError

from web3resolve.core.exceptions import MalformedResponseError, ResolverUnavailableError
from web3resolve.core.models import ProviderRecord
from web3resolve.core.types import ResolutionStatus, SourceName
from web3resolve.resolution.base import AbstractResolver, FetchResult

logger = logging.getLogger(__name__)


class Web3BioResolver(AbstractResolver):
    """
    web3.bio universal name service resolver.

    API Documentation: https://api.web3.bio/

    Both endpoints answer with a JSON array of profile records:
        GET /ns/{identifier}
        GET /ns/batch/{json array of identifiers}

    Works without an API key; with one, ``X-API-KEY: Bearer <key>`` is sent.
    """

    SOURCE_NAME: ClassVar[SourceName] = SourceName.WEB3BIO
    BASE_URL: ClassVar[str] = "https://api.web3.bio"

    def _get_auth_headers(self) -> dict[str, str]:
        # Read on every request so a reconfigured key applies immediately
        if self.config.api_key:
            return {"X-API-KEY": f"Bearer {self.config.api_key}"}
        return {}

    @staticmethod
    def single_path(identifier: str) -> str:
        return f"/ns/{quote(identifier, safe='')}"

    @staticmethod
    def batch_path(identifiers: list[str]) -> str:
        payload = json.dumps(identifiers, separators=(",", ":"))
        return f"/ns/batch/{quote(payload, safe='')}"

    async def fetch_single(self, identifier: str) -> FetchResult:
        """Fetch the profile for one name; ``record`` is set only if it has an address."""
        result = await self._fetch(self.single_path(identifier))
        if not result.success:
            return result

        first = result.records[0] if result.records else None
        if first is None or not first.address:
            return result.model_copy(
                update={"status": ResolutionStatus.NOT_FOUND, "records": []}
            )
        return result.model_copy(update={"records": [first]})

    async def fetch_batch(self, identifiers: list[str]) -> FetchResult:
        """Fetch profiles for several names in one request."""
        if not identifiers:
            raise ValueError("fetch_batch requires at least one identifier")
        return await self._fetch(self.batch_path(identifiers))

    async def _fetch(self, path: str) -> FetchResult:
        """GET a path and parse the record array, never raising."""
        start = time.monotonic()

        try:
            response = await self._make_request("GET", path)

            if not response.is_success:
                raise ResolverUnavailableError(
                    message=f"HTTP {response.status_code}",
                    source=self.source_name.value,
                    status_code=response.status_code,
                )

            records = self._parse_records(response.content)

            return FetchResult(
                status=ResolutionStatus.SUCCESS,
                records=records,
                source=self.source_name,
                status_code=response.status_code,
                duration_ms=(time.monotonic() - start) * 1000,
            )

        except ResolverUnavailableError as e:
            if e.status_code == 404:
                status = ResolutionStatus.NOT_FOUND
            elif e.status_code is not None:
                status = ResolutionStatus.HTTP_ERROR
            else:
                status = ResolutionStatus.TRANSPORT_ERROR
            return FetchResult(
                status=status,
                source=self.source_name,
                error_message=e.message,
                status_code=e.status_code,
                duration_ms=(time.monotonic() - start) * 1000,
            )

        except MalformedResponseError as e:
            return FetchResult(
                status=ResolutionStatus.MALFORMED,
                source=self.source_name,
                error_message=e.message,
                duration_ms=(time.monotonic() - start) * 1000,
            )

    def _parse_records(self, content: bytes) -> list[ProviderRecord]:
        """
        Parse a response body into records. A bare object counts as one record.

        Records that fail validation are skipped so the remaining names of a
        batch still resolve; only a body that is not JSON, or neither an array
        nor an object, is malformed.
        """
        try:
            data: Any = json.loads(content)
        except ValueError as e:
            raise MalformedResponseError(
                message=f"Invalid JSON body: {e}",
                source=self.source_name.value,
            ) from e

        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list):
            raise MalformedResponseError(
                message=f"Expected a JSON array, got {type(data).__name__}",
                source=self.source_name.value,
            )

        records: list[ProviderRecord] = []
        for index, item in enumerate(data):
            try:
                records.append(ProviderRecord.model_validate(item))
            except ValidationError as e:
                logger.warning(
                    f"{self.source_name} skipped record {index}: "
                    f"{e.error_count()} validation error(s)"
                )
        return records
