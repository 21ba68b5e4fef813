"""Concurrent retrieval of venue static and dynamic data."""

from __future__ import annotations

import logging
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass

from ...models.domain import VenuePricing, VenueStatic
from ..home_api.sources import LocationSource, PricingSource
from .deadline import Deadline, DeadlineExceeded
from .errors import UpstreamFetchFailed, UpstreamTimeout

logger = logging.getLogger(__name__)

STATIC_FAILURE_MESSAGE = "failed to fetch venue static info"
DYNAMIC_FAILURE_MESSAGE = "failed to fetch venue dynamic info"


@dataclass(frozen=True, slots=True)
class VenueInfo:
    static: VenueStatic
    pricing: VenuePricing


def fetch_venue_info(
    venue_slug: str,
    location_source: LocationSource,
    pricing_source: PricingSource,
    deadline: Deadline,
) -> VenueInfo:
    """Fetch both venue datasets concurrently under one shared deadline.

    Returns as soon as both lookups succeed. The first failed lookup raises
    :class:`UpstreamFetchFailed` without waiting for the other one; an expired
    deadline raises :class:`UpstreamTimeout`. On exit the deadline is cancelled
    so any lookup still in flight stops at its next check.
    """

    executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix=f"venue-{venue_slug}")
    try:
        static_future = executor.submit(location_source.fetch_static, venue_slug, deadline)
        pricing_future = executor.submit(pricing_source.fetch_pricing, venue_slug, deadline)
        labelled: dict[Future, tuple[str, str]] = {
            static_future: ("static", STATIC_FAILURE_MESSAGE),
            pricing_future: ("dynamic", DYNAMIC_FAILURE_MESSAGE),
        }

        pending = set(labelled)
        while pending:
            done, pending = wait(pending, timeout=deadline.remaining(), return_when=FIRST_EXCEPTION)
            for future in done:
                error = future.exception()
                if error is not None:
                    source, message = labelled[future]
                    if isinstance(error, DeadlineExceeded) or deadline.expired:
                        logger.warning(f"Venue {source} lookup for '{venue_slug}' ran out of time: {error}")
                        raise UpstreamTimeout() from error
                    logger.warning(f"Venue {source} lookup for '{venue_slug}' failed: {error}")
                    raise UpstreamFetchFailed(message, source=source) from error
            if pending and deadline.expired:
                logger.warning(f"Venue lookups for '{venue_slug}' did not finish before the deadline")
                raise UpstreamTimeout()

        return VenueInfo(static=static_future.result(), pricing=pricing_future.result())
    finally:
        deadline.cancel()
        executor.shutdown(wait=False, cancel_futures=True)
