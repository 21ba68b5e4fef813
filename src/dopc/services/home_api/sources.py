"""Contracts for the venue data sources consumed by the price engine."""

from __future__ import annotations

from typing import Protocol

from ...models.domain import VenuePricing, VenueStatic
from ..pricing.deadline import Deadline


class VenueFetchError(Exception):
    """An upstream venue lookup failed."""


class VenuePayloadError(VenueFetchError):
    """An upstream venue payload was missing required fields or malformed."""


class LocationSource(Protocol):
    def fetch_static(self, venue_slug: str, deadline: Deadline) -> VenueStatic:
        ...


class PricingSource(Protocol):
    def fetch_pricing(self, venue_slug: str, deadline: Deadline) -> VenuePricing:
        ...
