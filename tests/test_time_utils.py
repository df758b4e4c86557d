from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from fittrack.core.analytics.time_utils import (
    day_key,
    local_today,
    resolve_timezone,
    to_aware_utc,
    to_naive_utc,
)


@pytest.mark.parametrize("name", [None, "", "   ", "Not/AZone", "Mars/Olympus_Mons", "../../etc/passwd", "UTC+25"])
def test_unresolvable_timezones_fall_back_to_utc(name):
    tz, resolved = resolve_timezone(name)
    assert resolved == "UTC"
    assert datetime(2026, 1, 1, tzinfo=timezone.utc).astimezone(tz).utcoffset() == timedelta(0)


def test_valid_timezone_is_kept():
    tz, resolved = resolve_timezone("America/Los_Angeles")
    assert resolved == "America/Los_Angeles"
    assert tz == ZoneInfo("America/Los_Angeles")


def test_naive_datetime_is_treated_as_utc():
    value = to_aware_utc(datetime(2026, 3, 15, 8, 30))
    assert value == datetime(2026, 3, 15, 8, 30, tzinfo=timezone.utc)


def test_aware_datetime_is_converted():
    local = datetime(2026, 3, 15, 8, 0, tzinfo=ZoneInfo("Asia/Tokyo"))
    assert to_aware_utc(local) == datetime(2026, 3, 14, 23, 0, tzinfo=timezone.utc)


def test_iso_strings_and_epoch_seconds():
    expected = datetime(2026, 3, 15, 8, 0, tzinfo=timezone.utc)
    assert to_aware_utc("2026-03-15T08:00:00Z") == expected
    assert to_aware_utc("2026-03-15T09:00:00+01:00") == expected
    assert to_aware_utc(expected.timestamp()) == expected


@pytest.mark.parametrize("value", [None, True, "not a date", float("inf"), 1e20, object()])
def test_uninterpretable_values_are_none(value):
    assert to_aware_utc(value) is None


def test_to_naive_utc():
    aware = datetime(2026, 3, 15, 8, 0, tzinfo=ZoneInfo("Europe/Berlin"))
    assert to_naive_utc(aware) == datetime(2026, 3, 15, 7, 0)
    assert to_naive_utc(None) is None


def test_day_key_depends_on_timezone():
    instant = datetime(2026, 3, 15, 3, 0, tzinfo=timezone.utc)
    assert day_key(instant, timezone.utc) == "2026-03-15"
    assert day_key(instant, ZoneInfo("America/Los_Angeles")) == "2026-03-14"
    assert day_key(instant, ZoneInfo("Asia/Tokyo")) == "2026-03-15"


def test_day_key_is_zero_padded():
    assert day_key(datetime(987, 1, 2, tzinfo=timezone.utc), timezone.utc) == "0987-01-02"


def test_local_today_uses_injected_now():
    now = datetime(2026, 3, 15, 3, 0, tzinfo=timezone.utc)
    assert local_today(ZoneInfo("America/New_York"), now).isoformat() == "2026-03-14"
    assert local_today(timezone.utc, now).isoformat() == "2026-03-15"
