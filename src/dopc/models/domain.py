"""Domain models for venues, pricing rules and computed prices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

MIN_LATITUDE, MAX_LATITUDE = -90.0, 90.0
MIN_LONGITUDE, MAX_LONGITUDE = -180.0, 180.0


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A (latitude, longitude) pair in degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not MIN_LATITUDE <= self.latitude <= MAX_LATITUDE:
            raise ValueError(f"Latitude {self.latitude} is outside [-90, 90].")
        if not MIN_LONGITUDE <= self.longitude <= MAX_LONGITUDE:
            raise ValueError(f"Longitude {self.longitude} is outside [-180, 180].")


@dataclass(frozen=True, slots=True)
class VenueStatic:
    """Venue location and the cart value below which a surcharge applies."""

    location: Coordinate
    order_minimum_no_surcharge: int


@dataclass(frozen=True, slots=True)
class DistanceRange:
    """Pricing rule for distances in ``[min, max)``.

    ``max == 0`` marks a cutoff: delivery is unavailable from ``min`` onward.
    """

    min: int
    max: int
    a: int
    b: int

    @property
    def is_cutoff(self) -> bool:
        return self.max == 0


@dataclass(frozen=True, slots=True)
class VenuePricing:
    base_price: int
    distance_ranges: Tuple[DistanceRange, ...]


@dataclass(frozen=True, slots=True)
class PriceRequest:
    venue_slug: str
    cart_value: int
    user_location: Coordinate


@dataclass(frozen=True, slots=True)
class PriceResult:
    total_price: int
    small_order_surcharge: int
    cart_value: int
    delivery_fee: int
    delivery_distance: int
