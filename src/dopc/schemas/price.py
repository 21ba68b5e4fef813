"""Delivery order price request/response schemas."""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, Field

from ..models.domain import Coordinate, PriceRequest, PriceResult
from ..services.pricing.errors import InvalidInput


class DeliveryModel(BaseModel):
    fee: int
    distance: int


class PriceResponse(BaseModel):
    total_price: int
    small_order_surcharge: int
    cart_value: int
    delivery: DeliveryModel

    @classmethod
    def from_result(cls, result: PriceResult) -> "PriceResponse":
        return cls(
            total_price=result.total_price,
            small_order_surcharge=result.small_order_surcharge,
            cart_value=result.cart_value,
            delivery=DeliveryModel(fee=result.delivery_fee, distance=result.delivery_distance),
        )


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Human readable reason the price could not be computed.")


INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _parse_float(raw: str, low: float, high: float, message: str) -> float:
    if not DECIMAL_PATTERN.fullmatch(raw):
        raise InvalidInput(message)
    value = float(raw)
    if not low <= value <= high:
        raise InvalidInput(message)
    return value


def parse_price_query(
    venue_slug: Optional[str],
    cart_value: Optional[str],
    user_lat: Optional[str],
    user_lon: Optional[str],
) -> PriceRequest:
    """Validate raw query-string values into a :class:`PriceRequest`."""

    if not venue_slug or not cart_value or not user_lat or not user_lon:
        raise InvalidInput("missing required query parameters")

    if not INTEGER_PATTERN.fullmatch(cart_value):
        raise InvalidInput("cart_value must be a non-negative integer")
    cart = int(cart_value)
    if cart < 0:
        raise InvalidInput("cart_value must be a non-negative integer")

    lat = _parse_float(user_lat, -90.0, 90.0, "user_lat must be a valid latitude")
    lon = _parse_float(user_lon, -180.0, 180.0, "user_lon must be a valid longitude")

    return PriceRequest(
        venue_slug=venue_slug,
        cart_value=cart,
        user_location=Coordinate(latitude=lat, longitude=lon),
    )
