from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any, Literal, Protocol

from typing_extensions import Self

from chronoslots.util import DATETIME_FORMAT

if TYPE_CHECKING:
    from chronoslots.window import Window


def instant(dt: datetime) -> datetime:
    """Normalize a timezone-aware datetime to UTC.

    Datetimes sharing a tzinfo compare and subtract by wall clock, ignoring
    ``fold`` and offset changes. Comparing in UTC orders them as instants.
    """
    return dt.astimezone(timezone.utc)


class InvalidRangeError(ValueError):
    """Raised when a period is built with a start that is not before its end."""

    def __init__(self, start: datetime, end: datetime):
        self.start: datetime = start
        self.end: datetime = end
        super().__init__(
            f"Start time must be before end time.\n"
            f"Got start={start.isoformat()}, end={end.isoformat()}"
        )


def check_range(start: Any, end: Any) -> None:
    """Validate the bounds of a period.

    Raises:
        TypeError: If either bound is not a timezone-aware datetime
        InvalidRangeError: If ``start >= end``
    """
    for edge, bound in (("start", start), ("end", end)):
        if not isinstance(bound, datetime):
            raise TypeError(
                f"Period {edge} must be a timezone-aware datetime.\n"
                f"Got {type(bound).__name__!r}: {bound!r}"
            )
        if bound.tzinfo is None:
            raise TypeError(
                f"Period {edge} must be a timezone-aware datetime.\n"
                f"Got naive datetime: {bound!r}\n"
                f"Hint: Add timezone info:\n"
                f"  from zoneinfo import ZoneInfo\n"
                f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))  "
                f"# or 'Asia/Tokyo', etc."
            )
    if instant(start) >= instant(end):
        raise InvalidRangeError(start, end)


class HasBounds(Protocol):
    @property
    def start(self) -> datetime: ...

    @property
    def end(self) -> datetime: ...


def render(period: HasBounds) -> str:
    """Render any period-like value as ``start: S, end: E, duration: Hh Mm``."""
    total = int((instant(period.end) - instant(period.start)).total_seconds())
    hours, minutes = total // 3600, (total // 60) % 60
    return (
        f"start: {period.start.strftime(DATETIME_FORMAT)}, "
        f"end: {period.end.strftime(DATETIME_FORMAT)}, "
        f"duration: {hours}h {minutes}m"
    )


def to_string(periods: Iterable[HasBounds]) -> str:
    """Render a sequence of periods, one per line, in the given order."""
    return "\n ".join(render(period) for period in periods)


class Bounded:
    """Accessors shared by every period role.

    Subclasses are dataclasses declaring ``start`` and ``end`` fields.
    """

    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return instant(self.end) - instant(self.start)

    def to_string(self) -> str:
        return render(self)

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True, kw_only=True)
class Period(Bounded):
    """Immutable pair of ordered instants, ``start < end``."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        check_range(self.start, self.end)


Relation = Literal["contains", "overlaps_start", "contained", "overlaps_end", "disjoint"]


def _instants(busy: HasBounds, window: HasBounds) -> tuple[datetime, ...]:
    return (
        instant(busy.start),
        instant(busy.end),
        instant(window.start),
        instant(window.end),
    )


@dataclass(frozen=True, kw_only=True)
class BusyInterval(Period):
    """An already scheduled period that free slots must avoid."""

    def contains(self, window: "Window") -> bool:
        """Whether this interval covers the whole window."""
        b_start, b_end, w_start, w_end = _instants(self, window)
        return b_start <= w_start and w_end <= b_end

    def is_contained_in(self, window: "Window") -> bool:
        """Whether this interval sits inside the window."""
        b_start, b_end, w_start, w_end = _instants(self, window)
        return w_start <= b_start and b_end <= w_end

    def overlaps_at_start(self, window: "Window") -> bool:
        """Whether this interval covers the window's leading edge."""
        b_start, b_end, w_start, w_end = _instants(self, window)
        return b_start <= w_start and b_end <= w_end and w_start <= b_end

    def overlaps_at_end(self, window: "Window") -> bool:
        """Whether this interval covers the window's trailing edge."""
        b_start, b_end, w_start, w_end = _instants(self, window)
        return w_start <= b_start and w_end <= b_end and b_start <= w_end

    def relation_to(self, window: "Window") -> Relation:
        """Classify this interval against the window.

        The checks are ordered and the first match wins: boundary-touching
        intervals satisfy several predicates at once.
        """
        if self.contains(window):
            return "contains"
        if self.overlaps_at_start(window):
            return "overlaps_start"
        if self.is_contained_in(window):
            return "contained"
        if self.overlaps_at_end(window):
            return "overlaps_end"
        return "disjoint"

    def to_busy_interval(self) -> "BusyInterval":
        return self


@dataclass(frozen=True, kw_only=True)
class FreeInterval(Period):
    """A gap in the window that no busy interval covers."""

    @classmethod
    def create_from(cls, window: "Window", busy: BusyInterval) -> Self:
        """Build the gap between the window's start and a busy interval's start."""
        if instant(window.start) > instant(busy.start):
            raise InvalidRangeError(window.start, busy.start)
        return cls(start=window.start, end=busy.start)

    @classmethod
    def from_free_interval(cls, free: "FreeInterval") -> Self:
        if type(free) is cls:
            return free
        return cls(start=free.start, end=free.end)
