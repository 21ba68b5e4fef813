"""Errors raised while computing a delivery order price."""

from __future__ import annotations


class PriceError(Exception):
    """Base class for every terminal failure of a price computation."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(PriceError):
    """Request fields were missing or malformed."""


class UpstreamFetchFailed(PriceError):
    """One of the venue lookups failed or returned an unusable payload."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class UpstreamTimeout(PriceError):
    status_code = 504

    def __init__(self, message: str = "upstream timeout") -> None:
        super().__init__(message)


class DeliveryUnavailable(PriceError):
    def __init__(self, message: str = "delivery not available for this distance", blocked: bool = False) -> None:
        super().__init__(message)
        self.blocked = blocked
