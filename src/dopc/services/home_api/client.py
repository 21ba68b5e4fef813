"""HTTP client for the Home Assignment API venue endpoints."""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar
from urllib.parse import quote

import httpx

from ...config import settings
from ...models.domain import VenuePricing, VenueStatic
from ..pricing.deadline import Deadline
from .parsing import parse_pricing_payload, parse_static_payload
from .sources import VenueFetchError

# Upstream error bodies are truncated to this many characters in error messages.
MAX_ERROR_BODY_CHARS = 1024

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HomeAssignmentClient:
    """Fetches venue static and dynamic data.

    Implements both the location and the pricing source used by the price
    engine. Failed calls are reported immediately; nothing is retried.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.base_url = (base_url or settings.home_api_base_url).rstrip("/")
        if not self.base_url:
            raise ValueError("Home Assignment API base URL is not configured.")
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self._client = http_client

    def _venue_url(self, venue_slug: str, kind: str) -> str:
        return f"{self.base_url}/home-assignment-api/v1/venues/{quote(venue_slug, safe='')}/{kind}"

    def _get_json(self, url: str, deadline: Deadline) -> Any:
        deadline.check()
        timeout = httpx.Timeout(min(self.timeout, deadline.remaining()))
        # A shared client may be injected; otherwise each call owns a short-lived one
        client = self._client or httpx.Client()
        logger.debug(f"GET {url}")
        try:
            response = client.get(url, timeout=timeout)
        except httpx.HTTPError as exc:
            raise VenueFetchError(f"Request to {url} failed: {exc}") from exc
        finally:
            if self._client is None:
                client.close()

        if response.status_code != httpx.codes.OK:
            body = response.text[:MAX_ERROR_BODY_CHARS]
            raise VenueFetchError(f"{url} returned {response.status_code}: {body}")
        try:
            return response.json()
        except ValueError as exc:
            raise VenueFetchError(f"{url} returned invalid JSON: {exc}") from exc

    def _fetch(self, venue_slug: str, kind: str, deadline: Deadline, parse: Callable[[Any], T]) -> T:
        payload = self._get_json(self._venue_url(venue_slug, kind), deadline)
        return parse(payload)

    def fetch_static(self, venue_slug: str, deadline: Deadline) -> VenueStatic:
        return self._fetch(venue_slug, "static", deadline, parse_static_payload)

    def fetch_pricing(self, venue_slug: str, deadline: Deadline) -> VenuePricing:
        return self._fetch(venue_slug, "dynamic", deadline, parse_pricing_payload)


def check_health(base_url: str | None = None) -> bool:
    """Return True when the Home Assignment API answers without a server error."""
    base = base_url or settings.home_api_base_url
    if not base:
        return False
    try:
        response = httpx.get(base, timeout=5.0)
    except httpx.HTTPError:
        return False
    return response.status_code < 500
