"""Delivery order price endpoint."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, status

from ...config import settings
from ...schemas.price import ErrorResponse, PriceResponse, parse_price_query
from ...services.home_api.client import HomeAssignmentClient
from ...services.pricing.deadline import Deadline
from ...services.pricing.engine import PriceEngine

router = APIRouter(tags=["pricing"])


def build_price_engine() -> PriceEngine:
    client = HomeAssignmentClient()
    return PriceEngine(location_source=client, pricing_source=client)


@router.get(
    "/delivery-order-price",
    response_model=PriceResponse,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_504_GATEWAY_TIMEOUT: {"model": ErrorResponse},
    },
)
def delivery_order_price(
    venue_slug: Optional[str] = Query(default=None),
    cart_value: Optional[str] = Query(default=None, description="Cart value in minor currency units."),
    user_lat: Optional[str] = Query(default=None),
    user_lon: Optional[str] = Query(default=None),
) -> PriceResponse:
    """Calculate the total price of a delivery order."""
    request = parse_price_query(venue_slug, cart_value, user_lat, user_lon)
    engine = build_price_engine()
    result = engine.compute_price(
        request.venue_slug,
        request.cart_value,
        request.user_location,
        Deadline.after(settings.fetch_deadline_seconds),
    )
    return PriceResponse.from_result(result)
