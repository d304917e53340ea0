"""Utility constants and helpers for chronoslots.

Time unit constants are ``timedelta`` values so they can be added to the
timezone-aware datetimes every period is built from.
"""

from collections.abc import Callable
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from dateutil.parser import isoparse

# Rendering format used by every period's to_string()
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Time unit constants
SECOND = timedelta(seconds=1)
MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
DAY = timedelta(days=1)
WEEK = timedelta(weeks=1)


def now(tz: str = "UTC") -> datetime:
    """Current time as a timezone-aware datetime in the given IANA zone."""
    return datetime.now(ZoneInfo(tz))


def at_tz(tz: str) -> Callable[..., datetime]:
    """Return a factory for timezone-aware datetimes in the given zone.

    The factory accepts either an ISO-8601 string or datetime components.
    Strings that carry their own UTC offset keep it; naive strings and
    components are placed in ``tz``.

    Example:
        >>> at = at_tz("Asia/Tokyo")
        >>> at("2025-01-06T09:00")
        >>> at(2025, 1, 6, 9, 0)
    """
    zone = ZoneInfo(tz)

    def at(value: str | int, *components: int) -> datetime:
        if isinstance(value, str):
            if components:
                raise TypeError(
                    f"at() takes either an ISO-8601 string or datetime components, "
                    f"not both.\nGot: {value!r}, {components!r}"
                )
            parsed = isoparse(value)
            if parsed.tzinfo is None:
                return parsed.replace(tzinfo=zone)
            return parsed
        return datetime(value, *components, tzinfo=zone)

    return at
