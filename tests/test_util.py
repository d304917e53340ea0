from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from chronoslots.util import DAY, HOUR, MINUTE, WEEK, at_tz, now


def test_units() -> None:
    assert 60 * MINUTE == HOUR
    assert 24 * HOUR == DAY
    assert 7 * DAY == WEEK


def test_now_is_aware() -> None:
    current = now("Asia/Tokyo")

    assert current.tzinfo == ZoneInfo("Asia/Tokyo")
    assert abs(current - datetime.now(timezone.utc)) < timedelta(minutes=1)


def test_now_defaults_to_utc() -> None:
    assert now().utcoffset() == timedelta(0)


def test_at_tz_components() -> None:
    at = at_tz("Asia/Tokyo")

    assert at(2025, 1, 6, 9, 30) == datetime(
        2025, 1, 6, 9, 30, tzinfo=ZoneInfo("Asia/Tokyo")
    )


def test_at_tz_naive_string_takes_zone() -> None:
    at = at_tz("America/Los_Angeles")
    parsed = at("2025-07-01T08:00")

    assert parsed.tzinfo == ZoneInfo("America/Los_Angeles")
    assert parsed.hour == 8


def test_at_tz_date_string_is_midnight() -> None:
    parsed = at_tz("UTC")("2025-01-01")

    assert parsed == datetime(2025, 1, 1, tzinfo=ZoneInfo("UTC"))


def test_at_tz_keeps_explicit_offset() -> None:
    parsed = at_tz("Asia/Tokyo")("2025-01-06T09:00:00+00:00")

    assert parsed.utcoffset() == timedelta(0)


def test_at_tz_rejects_string_with_components() -> None:
    with pytest.raises(TypeError):
        at_tz("UTC")("2025-01-01", 3)
