"""Find the free slots in the next eight hours around two meetings.

Run with ``python examples/example.py``.
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from chronoslots import HOUR, BusyInterval, FreeInterval, Window, find, now, to_string


# Your record type for events read from storage
@dataclass(frozen=True)
class ScheduledEvent:
    start: datetime
    end: datetime

    def to_busy_interval(self) -> BusyInterval:
        return BusyInterval(start=self.start, end=self.end)


# Your record type for the slots you hand back
@dataclass(frozen=True)
class AvailableSlot:
    start: datetime
    end: datetime

    @classmethod
    def from_free_interval(cls, free: FreeInterval) -> "AvailableSlot":
        return cls(start=free.start, end=free.end)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    start = now("Asia/Tokyo")

    # Typically taken from a request
    window = Window(start=start, end=start + 8 * HOUR)
    print(f"Window:\n {window}\n")

    # Typically loaded from a database
    events = [
        ScheduledEvent(start=start + 1 * HOUR, end=start + 2 * HOUR),
        ScheduledEvent(start=start + 3 * HOUR, end=start + 4 * HOUR),
    ]
    print(f"Busy:\n {to_string(events)}\n")

    slots = find(window, events, AvailableSlot)
    print(f"Slots:\n {to_string(slots)}\n")


if __name__ == "__main__":
    main()
