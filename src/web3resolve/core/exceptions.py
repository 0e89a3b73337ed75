"""Custom exception hierarchy for web3resolve."""

from typing import Any


class Web3ResolveError(Exception):
    """Base exception for all web3resolve errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(Web3ResolveError):
    """Invalid resolver configuration update."""

    pass


class ResolutionError(Web3ResolveError):
    """Failed to resolve identifier."""

    pass


class ResolverUnavailableError(ResolutionError):
    """Upstream provider could not be reached or answered with an error status."""

    def __init__(
        self,
        message: str,
        source: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
        self.status_code = status_code


class MalformedResponseError(ResolutionError):
    """Upstream answered but the body could not be parsed."""

    def __init__(
        self,
        message: str,
        source: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
