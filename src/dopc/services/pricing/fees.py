"""Fee, surcharge and total arithmetic."""

from __future__ import annotations

from ...models.domain import DistanceRange, PriceResult
from ..geospatial import round_half_away_from_zero


def small_order_surcharge(order_minimum_no_surcharge: int, cart_value: int) -> int:
    return max(0, order_minimum_no_surcharge - cart_value)


def delivery_fee(base_price: int, distance_range: DistanceRange, distance: int) -> int:
    """``base_price + a + round(b * distance / 10)``, rounded once at the end."""

    return base_price + distance_range.a + round_half_away_from_zero(distance_range.b * distance / 10)


def compose_price(
    *,
    cart_value: int,
    order_minimum_no_surcharge: int,
    base_price: int,
    distance_range: DistanceRange,
    distance: int,
) -> PriceResult:
    surcharge = small_order_surcharge(order_minimum_no_surcharge, cart_value)
    fee = delivery_fee(base_price, distance_range, distance)
    return PriceResult(
        total_price=cart_value + surcharge + fee,
        small_order_surcharge=surcharge,
        cart_value=cart_value,
        delivery_fee=fee,
        delivery_distance=distance,
    )
