"""Cancellable deadline shared by the upstream lookups of one request."""

from __future__ import annotations

import threading
import time


class DeadlineExceeded(Exception):
    """Raised by :meth:`Deadline.check` once the deadline is cancelled or expired."""


class Deadline:
    """A monotonic-clock deadline that can also be cancelled explicitly.

    One instance is created per price request and handed to every lookup of
    that request; it is never shared across requests.
    """

    def __init__(self, expires_at: float) -> None:
        self._expires_at = expires_at
        self._cancelled = threading.Event()

    @classmethod
    def after(cls, seconds: float) -> "Deadline":
        return cls(time.monotonic() + seconds)

    def remaining(self) -> float:
        """Seconds left before expiry; 0.0 when expired or cancelled."""
        if self._cancelled.is_set():
            return 0.0
        return max(0.0, self._expires_at - time.monotonic())

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self.cancelled or time.monotonic() >= self._expires_at

    def cancel(self) -> None:
        self._cancelled.set()

    def check(self) -> None:
        if self.cancelled:
            raise DeadlineExceeded("Deadline cancelled.")
        if self.expired:
            raise DeadlineExceeded("Deadline expired.")
