"""Route group exports."""

from . import health, price

__all__ = ["health", "price"]
