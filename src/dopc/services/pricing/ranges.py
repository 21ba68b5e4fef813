"""Distance range selection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from ...models.domain import DistanceRange


class RangeOutcome(str, Enum):
    SELECTED = "selected"
    UNAVAILABLE = "unavailable"
    BLOCKED = "blocked"


@dataclass(frozen=True, slots=True)
class RangeSelection:
    outcome: RangeOutcome
    range: Optional[DistanceRange] = None

    @property
    def available(self) -> bool:
        return self.outcome is RangeOutcome.SELECTED


def select_range(ranges: Sequence[DistanceRange], distance: int) -> RangeSelection:
    """Return the first range that structurally matches ``distance``.

    Ranges are checked in order. A cutoff range (``max == 0``) reached at or
    beyond its ``min`` blocks delivery; otherwise the first half-open
    ``[min, max)`` interval containing the distance is selected.
    """

    for distance_range in ranges:
        if distance_range.is_cutoff:
            if distance >= distance_range.min:
                return RangeSelection(RangeOutcome.BLOCKED)
            continue
        if distance_range.min <= distance < distance_range.max:
            return RangeSelection(RangeOutcome.SELECTED, distance_range)
    return RangeSelection(RangeOutcome.UNAVAILABLE)
