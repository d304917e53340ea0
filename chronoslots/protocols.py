"""Conversion contracts between caller records and canonical periods.

Caller types take part in a slot search by implementing these protocols
structurally; no base class is required.

Example:
    >>> @dataclass
    ... class Meeting:
    ...     start: datetime
    ...     end: datetime
    ...
    ...     def to_busy_interval(self) -> BusyInterval:
    ...         return BusyInterval(start=self.start, end=self.end)
"""

from datetime import datetime
from typing import Protocol, TypeVar, runtime_checkable

from typing_extensions import Self

from chronoslots.interval import BusyInterval, FreeInterval


@runtime_checkable
class Input(Protocol):
    """A caller record that can be normalized into a busy interval."""

    @property
    def start(self) -> datetime: ...

    @property
    def end(self) -> datetime: ...

    def to_busy_interval(self) -> BusyInterval:
        """Raise InvalidRangeError if the record's bounds are not ordered."""
        ...


@runtime_checkable
class Output(Protocol):
    """A caller record that can be materialized from a free interval."""

    @property
    def start(self) -> datetime: ...

    @property
    def end(self) -> datetime: ...

    @classmethod
    def from_free_interval(cls, free: FreeInterval) -> Self:
        """Copy the free interval's bounds verbatim. Must not fail."""
        ...


Out = TypeVar("Out", bound=Output)
