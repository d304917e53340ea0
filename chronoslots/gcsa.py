"""Google Calendar integration for slot searches.

This module adapts gcsa events to the conversion contracts so a calendar's
schedule can be searched for free time directly.

Example:
    >>> from gcsa.google_calendar import GoogleCalendar
    >>> from chronoslots import Window, at_tz
    >>> from chronoslots.gcsa import free_slots
    >>>
    >>> at = at_tz("Asia/Tokyo")
    >>> calendar = GoogleCalendar("me@example.com")
    >>> window = Window(start=at("2025-01-06T09:00"), end=at("2025-01-06T18:00"))
    >>> for slot in free_slots(calendar, window, tz="Asia/Tokyo"):
    ...     print(slot)
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any
from zoneinfo import ZoneInfo

from gcsa.event import Event as GcsaEvent
from gcsa.google_calendar import GoogleCalendar

from chronoslots.finder import find
from chronoslots.interval import BusyInterval, FreeInterval, HasBounds, instant

_UTC_TIMEZONE = "UTC"
_TRANSPARENT = "transparent"


def _normalize_datetime(dt: datetime | date, zone: ZoneInfo) -> datetime:
    """Normalize an event bound to a timezone-aware datetime.

    All-day events carry dates with an exclusive end date, so both edges map
    to midnight in ``zone``. Naive datetimes are assumed to be in ``zone``.
    """
    if not isinstance(dt, datetime):
        return datetime.combine(dt, time.min, tzinfo=zone)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=zone)
    return dt


def _zone_name(dt: datetime) -> str | None:
    """IANA name of the datetime's zone, or None for fixed-offset zones."""
    return getattr(dt.tzinfo, "key", None)


@dataclass(frozen=True, kw_only=True)
class CalendarEvent:
    """A Google Calendar event viewed as a busy record.

    Attributes:
        summary: Event title
        event_id: Google Calendar event ID (None for unsaved events)
        start: Timezone-aware start
        end: Timezone-aware, exclusive end
    """

    summary: str
    event_id: str | None
    start: datetime
    end: datetime

    @classmethod
    def from_gcsa(cls, event: GcsaEvent, tz: str = _UTC_TIMEZONE) -> "CalendarEvent":
        zone = ZoneInfo(tz)
        return cls(
            summary=event.summary,
            event_id=getattr(event, "event_id", None),
            start=_normalize_datetime(event.start, zone),
            end=_normalize_datetime(event.end, zone),
        )

    def to_busy_interval(self) -> BusyInterval:
        return BusyInterval(start=self.start, end=self.end)


def busy_events(
    calendar: GoogleCalendar | Any, window: HasBounds, tz: str = _UTC_TIMEZONE
) -> list[CalendarEvent]:
    """Fetch the events overlapping ``window`` as busy records.

    Recurring events are expanded by the API (``single_events=True``).
    Events marked as free (transparent) do not block time and are skipped.
    """
    events = calendar.get_events(
        time_min=window.start,
        time_max=window.end,
        single_events=True,
        order_by="startTime",
    )
    return [
        CalendarEvent.from_gcsa(event, tz)
        for event in events
        if getattr(event, "transparency", None) != _TRANSPARENT
    ]


def free_slots(
    calendar: GoogleCalendar | Any, window: HasBounds, tz: str = _UTC_TIMEZONE
) -> list[FreeInterval]:
    """Free slots left in ``window`` by the calendar's events."""
    return find(window, busy_events(calendar, window, tz))


def to_gcsa_event(free: FreeInterval, summary: str, **metadata: Any) -> GcsaEvent:
    """Materialize a free slot as a new gcsa event, e.g. to hold the time.

    Args:
        free: The slot to book
        summary: Title of the new event
        **metadata: Extra gcsa Event keyword arguments (description, location...)
    """
    start, end = free.start, free.end
    zone = _zone_name(start)
    if zone is None:
        # Fixed offsets have no IANA name; label the instants as UTC instead
        start, end = instant(start), instant(end)
        zone = _UTC_TIMEZONE
    return GcsaEvent(summary, start=start, end=end, timezone=zone, **metadata)
