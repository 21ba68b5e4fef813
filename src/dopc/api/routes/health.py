"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


def _get_home_api_health_check():
    """Lazy import to avoid startup failures."""
    from ...services.home_api.client import check_health as home_api_health_check
    return home_api_health_check


@router.get("/health/home-api", status_code=status.HTTP_200_OK)
def health_home_api() -> dict:
    """Check that the upstream venue API is reachable."""
    home_api_health_check = _get_home_api_health_check()
    return {"service": "home-api", "healthy": home_api_health_check()}
