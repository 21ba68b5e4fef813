"""Delivery order price orchestration service."""

from __future__ import annotations

import logging

from ...models.domain import Coordinate, PriceResult
from ..geospatial import haversine_meters
from ..home_api.sources import LocationSource, PricingSource
from .deadline import Deadline
from .errors import DeliveryUnavailable, InvalidInput
from .fees import compose_price
from .fetcher import fetch_venue_info
from .ranges import RangeOutcome, select_range

logger = logging.getLogger(__name__)


class PriceEngine:
    """Computes the total price of a delivery order for one venue."""

    def __init__(self, location_source: LocationSource, pricing_source: PricingSource) -> None:
        self.location_source = location_source
        self.pricing_source = pricing_source

    def compute_price(
        self,
        venue_slug: str,
        cart_value: int,
        user_location: Coordinate,
        deadline: Deadline,
    ) -> PriceResult:
        if not venue_slug:
            raise InvalidInput("venue_slug must not be empty")
        if isinstance(cart_value, bool) or not isinstance(cart_value, int) or cart_value < 0:
            raise InvalidInput("cart_value must be a non-negative integer")

        venue = fetch_venue_info(venue_slug, self.location_source, self.pricing_source, deadline)

        distance = haversine_meters(user_location, venue.static.location)
        selection = select_range(venue.pricing.distance_ranges, distance)
        if not selection.available:
            logger.info(
                f"Delivery from '{venue_slug}' not offered at {distance} m ({selection.outcome.value})"
            )
            raise DeliveryUnavailable(blocked=selection.outcome is RangeOutcome.BLOCKED)

        return compose_price(
            cart_value=cart_value,
            order_minimum_no_surcharge=venue.static.order_minimum_no_surcharge,
            base_price=venue.pricing.base_price,
            distance_range=selection.range,
            distance=distance,
        )
