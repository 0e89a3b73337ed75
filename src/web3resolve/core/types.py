"""Core enums and type definitions."""

from enum import StrEnum


class InputType(StrEnum):
    """Kinds of identifier the classifier can recognize."""

    ADDRESS = "address"
    ENS = "ens"
    BASENAME = "basename"  # .base.eth sub-namespace of ENS
    UNKNOWN = "unknown"


class Platform(StrEnum):
    """Platform a resolved address was obtained from."""

    ETHEREUM = "ethereum"
    ENS = "ens"
    BASENAMES = "basenames"


class SourceName(StrEnum):
    """Known upstream resolution providers."""

    WEB3BIO = "web3bio"


class ResolutionStatus(StrEnum):
    """Outcome of an upstream lookup."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    HTTP_ERROR = "http_error"  # Non-success status code
    TRANSPORT_ERROR = "transport_error"
    MALFORMED = "malformed"  # Body was not the expected JSON shape
