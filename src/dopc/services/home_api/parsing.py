"""Normalise Home Assignment API venue payloads into domain records.

The static endpoint reports a venue location in one of three shapes::

    {"location": {"coordinates": [lon, lat]}}             # GeoJSON order
    {"location": {"coordinates": {"lat": .., "lon": ..}}}
    {"location": {"lat": .., "lon": ..}}

Every field the price engine needs must be present. Missing data raises
:class:`VenuePayloadError` rather than defaulting to zero, so a venue that
really sits at (0, 0) is still accepted.
"""

from __future__ import annotations

import math
from typing import Any, Mapping

from ...models.domain import Coordinate, DistanceRange, VenuePricing, VenueStatic
from .sources import VenuePayloadError


def _mapping(container: Any, key: str, path: str) -> Mapping[str, Any]:
    value = container.get(key) if isinstance(container, Mapping) else None
    if not isinstance(value, Mapping):
        raise VenuePayloadError(f"missing {path}")
    return value


def _number(container: Mapping[str, Any], key: str, path: str) -> float:
    if key not in container:
        raise VenuePayloadError(f"missing {path}")
    value = container[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise VenuePayloadError(f"{path} must be numeric, got {value!r}")
    if not math.isfinite(value):
        raise VenuePayloadError(f"{path} must be finite, got {value!r}")
    return float(value)


def _integer(container: Mapping[str, Any], key: str, path: str) -> int:
    return int(_number(container, key, path))


def _parse_location(location: Mapping[str, Any]) -> Coordinate:
    coordinates = location.get("coordinates")
    if isinstance(coordinates, Mapping):
        lat = _number(coordinates, "lat", "location.coordinates.lat")
        lon = _number(coordinates, "lon", "location.coordinates.lon")
    elif isinstance(coordinates, (list, tuple)):
        if len(coordinates) < 2:
            raise VenuePayloadError("location.coordinates must hold [lon, lat]")
        pair = {"lon": coordinates[0], "lat": coordinates[1]}
        lon = _number(pair, "lon", "location.coordinates[0]")
        lat = _number(pair, "lat", "location.coordinates[1]")
    else:
        lat = _number(location, "lat", "location.lat")
        lon = _number(location, "lon", "location.lon")

    try:
        return Coordinate(latitude=lat, longitude=lon)
    except ValueError as exc:
        raise VenuePayloadError(str(exc)) from exc


def parse_static_payload(payload: Any) -> VenueStatic:
    venue_raw = _mapping(payload, "venue_raw", "venue_raw")
    location = _mapping(venue_raw, "location", "venue_raw.location")
    delivery_specs = _mapping(venue_raw, "delivery_specs", "venue_raw.delivery_specs")
    return VenueStatic(
        location=_parse_location(location),
        order_minimum_no_surcharge=_integer(
            delivery_specs,
            "order_minimum_no_surcharge",
            "delivery_specs.order_minimum_no_surcharge",
        ),
    )


def parse_pricing_payload(payload: Any) -> VenuePricing:
    venue_raw = _mapping(payload, "venue_raw", "venue_raw")
    delivery_specs = _mapping(venue_raw, "delivery_specs", "venue_raw.delivery_specs")
    pricing = _mapping(delivery_specs, "delivery_pricing", "delivery_specs.delivery_pricing")

    raw_ranges = pricing.get("distance_ranges")
    if not isinstance(raw_ranges, list):
        raise VenuePayloadError("missing delivery_pricing.distance_ranges")

    ranges = []
    for index, raw in enumerate(raw_ranges):
        if not isinstance(raw, Mapping):
            raise VenuePayloadError(f"distance_ranges[{index}] must be an object")
        prefix = f"distance_ranges[{index}]"
        ranges.append(
            DistanceRange(
                min=_integer(raw, "min", f"{prefix}.min"),
                max=_integer(raw, "max", f"{prefix}.max"),
                a=_integer(raw, "a", f"{prefix}.a"),
                b=_integer(raw, "b", f"{prefix}.b"),
            )
        )

    return VenuePricing(
        base_price=_integer(pricing, "base_price", "delivery_pricing.base_price"),
        distance_ranges=tuple(ranges),
    )
