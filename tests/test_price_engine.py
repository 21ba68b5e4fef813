import pytest

from dopc.models.domain import Coordinate, DistanceRange, VenuePricing, VenueStatic
from dopc.services.home_api.sources import VenuePayloadError
from dopc.services.pricing.deadline import Deadline
from dopc.services.pricing.engine import PriceEngine
from dopc.services.pricing.errors import DeliveryUnavailable, InvalidInput, UpstreamFetchFailed

VENUE = Coordinate(0.0, 0.0)


class CountingSource:
    """Serves fixed venue data and records every lookup."""

    def __init__(self, static: VenueStatic, pricing: VenuePricing, static_error=None, pricing_error=None):
        self.static = static
        self.pricing = pricing
        self.static_error = static_error
        self.pricing_error = pricing_error
        self.static_calls = 0
        self.pricing_calls = 0

    def fetch_static(self, venue_slug, deadline):
        self.static_calls += 1
        if self.static_error:
            raise self.static_error
        return self.static

    def fetch_pricing(self, venue_slug, deadline):
        self.pricing_calls += 1
        if self.pricing_error:
            raise self.pricing_error
        return self.pricing


def _engine(source: CountingSource) -> PriceEngine:
    return PriceEngine(location_source=source, pricing_source=source)


def _source(order_minimum: int = 1000, base_price: int = 199, ranges=None, **errors) -> CountingSource:
    if ranges is None:
        ranges = (
            DistanceRange(min=0, max=500, a=0, b=0),
            DistanceRange(min=500, max=2000, a=100, b=1),
            DistanceRange(min=2000, max=0, a=0, b=0),
        )
    return CountingSource(
        VenueStatic(location=VENUE, order_minimum_no_surcharge=order_minimum),
        VenuePricing(base_price=base_price, distance_ranges=tuple(ranges)),
        **errors,
    )


def test_compute_price_in_second_range() -> None:
    source = _source()

    result = _engine(source).compute_price("venue", 1000, Coordinate(0.0, 0.005), Deadline.after(5))

    assert result.delivery_distance == 556
    assert result.small_order_surcharge == 0
    assert result.delivery_fee > 199
    assert result.delivery_fee == 199 + 100 + 56
    assert result.total_price == result.cart_value + result.small_order_surcharge + result.delivery_fee
    assert source.static_calls == 1
    assert source.pricing_calls == 1


def test_compute_price_adds_small_order_surcharge() -> None:
    source = _source(order_minimum=1000)

    result = _engine(source).compute_price("venue", 800, Coordinate(0.0, 0.001), Deadline.after(5))

    assert result.delivery_distance == 111
    assert result.small_order_surcharge == 200
    assert result.delivery_fee == 199
    assert result.total_price == 800 + 200 + 199


def test_venue_at_origin_with_user_on_top_of_it() -> None:
    source = _source(order_minimum=0, base_price=0, ranges=[DistanceRange(min=0, max=1000, a=0, b=0)])

    result = _engine(source).compute_price("venue", 0, Coordinate(0.0, 0.0), Deadline.after(5))

    assert result.delivery_distance == 0
    assert result.total_price == 0


@pytest.mark.parametrize("cart_value", [0, 1000, 100_000])
def test_cutoff_reached_is_delivery_unavailable(cart_value: int) -> None:
    source = _source(ranges=[DistanceRange(min=0, max=1000, a=0, b=0), DistanceRange(min=1000, max=0, a=0, b=0)])

    with pytest.raises(DeliveryUnavailable) as excinfo:
        _engine(source).compute_price("venue", cart_value, Coordinate(0.0, 0.01), Deadline.after(5))

    assert excinfo.value.blocked
    assert excinfo.value.status_code == 400


def test_distance_outside_all_ranges_is_delivery_unavailable() -> None:
    source = _source(ranges=[DistanceRange(min=0, max=500, a=0, b=0)])

    with pytest.raises(DeliveryUnavailable) as excinfo:
        _engine(source).compute_price("venue", 1000, Coordinate(0.0, 0.01), Deadline.after(5))

    assert not excinfo.value.blocked


@pytest.mark.parametrize("venue_slug, cart_value", [("", 1000), ("venue", -1), ("venue", True), ("venue", 10.5)])
def test_invalid_input_makes_no_upstream_calls(venue_slug, cart_value) -> None:
    source = _source()

    with pytest.raises(InvalidInput):
        _engine(source).compute_price(venue_slug, cart_value, Coordinate(0.0, 0.0), Deadline.after(5))

    assert source.static_calls == 0
    assert source.pricing_calls == 0


@pytest.mark.parametrize(
    "errors, failed_source",
    [
        ({"static_error": VenuePayloadError("missing venue_raw")}, "static"),
        ({"pricing_error": VenuePayloadError("missing venue_raw")}, "dynamic"),
    ],
)
def test_one_failing_source_stops_computation(monkeypatch: pytest.MonkeyPatch, errors, failed_source) -> None:
    from dopc.services.pricing import engine as engine_module

    def fail_if_called(*args, **kwargs):
        raise AssertionError("distance must not be computed after a failed lookup")

    monkeypatch.setattr(engine_module, "haversine_meters", fail_if_called)
    source = _source(**errors)

    with pytest.raises(UpstreamFetchFailed) as excinfo:
        _engine(source).compute_price("venue", 1000, Coordinate(0.0, 0.0), Deadline.after(5))

    assert excinfo.value.source == failed_source
