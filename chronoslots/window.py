"""The mutable scan state of a slot search.

A Window starts as the caller's query span and shrinks from the left as busy
intervals are consumed. Unlike the other period roles it may reach
``start == end`` once it has been fully consumed.
"""

from dataclasses import dataclass
from datetime import datetime

from chronoslots.interval import (
    Bounded,
    BusyInterval,
    FreeInterval,
    HasBounds,
    check_range,
    instant,
)


@dataclass(kw_only=True)
class Window(Bounded):
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        check_range(self.start, self.end)

    @classmethod
    def of(cls, period: HasBounds) -> "Window":
        """Build a fresh window spanning any period-like value."""
        return cls(start=period.start, end=period.end)

    def has_remaining(self) -> bool:
        return instant(self.start) < instant(self.end)

    def advance_past(self, busy: BusyInterval) -> None:
        """Move the window's start to the end of a consumed busy interval."""
        self.start = busy.end

    def collapse(self) -> None:
        """Mark the window as fully consumed."""
        self.start = self.end

    def to_free_interval(self) -> FreeInterval:
        """Convert what remains of the window into a free interval.

        Raises:
            InvalidRangeError: If the window has collapsed
        """
        return FreeInterval(start=self.start, end=self.end)
