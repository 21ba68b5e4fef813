"""Geospatial helper functions."""

from __future__ import annotations

import math

from ..models.domain import Coordinate

EARTH_RADIUS_M = 6_371_000.0


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, with .5 moving away from zero."""

    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def haversine_meters(origin: Coordinate, destination: Coordinate) -> int:
    """Great-circle distance between two coordinates in whole meters."""

    phi1, phi2 = math.radians(origin.latitude), math.radians(destination.latitude)
    d_phi = math.radians(destination.latitude - origin.latitude)
    d_lambda = math.radians(destination.longitude - origin.longitude)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # Rounding can push a just past 1.0 for near-antipodal points
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return round_half_away_from_zero(EARTH_RADIUS_M * c)
