# tests/test_input.py

import pytest
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from datefmt import format_date, set_timezone, InvalidDateError, InvalidFormatError, MISSING
from datefmt.core.time import normalize_date, utc_offset_minutes

EASTERN = ZoneInfo("America/New_York")

def test_datetime_input():
    assert format_date("YYYY-MM-dd", datetime(2024, 2, 5, tzinfo=timezone.utc)) == "2024-02-05"

def test_unix_timestamp_ms():
    # Date.parse('2024-02-05')
    assert format_date("YYYY-MM-dd", 1707091200000) == "2024-02-05"
    assert format_date("YYYY-MM-ddTHH:mm:ss.ff", 1707094923004) == "2024-02-05T01:02:03.004"
    assert format_date("YYYY-MM-dd", 1707091200000.0) == "2024-02-05"

def test_negative_timestamp():
    assert format_date("YYYY-MM-dd HH", -3600000) == "1969-12-31 23"

def test_iso_string():
    assert format_date("YYYY-MM-dd", "2024-02-05T00:00:00Z") == "2024-02-05"
    assert format_date("HH:mm Z", "2024-02-05T10:30:00+02:00") == "08:30 +00:00"

def test_date_only_string_is_utc_midnight():
    set_timezone(EASTERN)
    assert format_date("YYYY-MM-dd HH Z", "2024-02-05") == "2024-02-04 19 -05:00"

def test_naive_iso_string_is_wall_clock():
    set_timezone(EASTERN)
    assert format_date("YYYY-MM-dd HH Z", "2024-02-05T10:00:00") == "2024-02-05 10 -05:00"

def test_defaults_to_now():
    assert format_date("YYYY-MM-dd") == "2024-02-05"
    assert format_date("YYYY-MM-dd", MISSING) == "2024-02-05"

def test_now_in_configured_zone():
    set_timezone(EASTERN)
    assert format_date("YYYY-MM-dd HH:mm") == "2024-02-04 20:02"

def test_date_object_is_midnight():
    assert format_date("YYYY-MM-dd HH:mm", date(2024, 2, 5)) == "2024-02-05 00:00"

def test_aware_datetime_converted_to_zone():
    set_timezone(EASTERN)
    d = datetime(2024, 2, 5, 1, 2, 3, tzinfo=timezone.utc)
    assert format_date("dd HH ZZ", d) == "04 20 -0500"

def test_naive_datetime_takes_zone():
    set_timezone(timezone(timedelta(hours=9)))
    assert format_date("HH Z", datetime(2024, 2, 5, 15)) == "15 +09:00"

@pytest.mark.parametrize("bad", [123, True, [], {}, None, float("nan"), 1.5, b"YYYY"])
def test_invalid_format(bad):
    with pytest.raises(InvalidFormatError, match="Argument `format` must be a string"):
        format_date(bad)

def test_invalid_format_is_type_error():
    with pytest.raises(TypeError):
        format_date(123)

def test_format_checked_before_date():
    with pytest.raises(InvalidFormatError):
        format_date(None, None)

@pytest.mark.parametrize("bad", [
    None, {}, [], True, False,
    float("nan"), float("inf"), float("-inf"),
    "not a date", "2024-13-45", "",
    1e20, object(),
])
def test_invalid_date(bad):
    with pytest.raises(InvalidDateError, match="Argument `date` must be instance of Date or Unix Timestamp or ISODate String"):
        format_date("YYYY-MM-dd", bad)

def test_normalize_uses_clock():
    fixed = datetime(2000, 1, 1, 12, tzinfo=timezone.utc)
    assert normalize_date(tz=timezone.utc, clock=lambda: fixed) == fixed

def test_normalize_returns_aware():
    dt = normalize_date(0, tz=None)
    assert dt.tzinfo is not None
    assert dt.timestamp() == 0

def test_utc_offset_minutes():
    assert utc_offset_minutes(datetime(2024, 1, 1, tzinfo=timezone(timedelta(hours=-5)))) == -300
    assert utc_offset_minutes(datetime(2024, 1, 1)) == 0

def test_missing_is_falsy_singleton():
    assert not MISSING
    assert repr(MISSING) == "MISSING"
    assert type(MISSING)() is MISSING

@pytest.mark.parametrize("value, zone", [
    ("0001-01-01", EASTERN),
    (datetime(9999, 12, 31, 23, tzinfo=EASTERN), timezone.utc),
    (datetime(1, 1, 1, tzinfo=timezone.utc), EASTERN),
    ("9999-12-31T23:00:00-05:00", timezone.utc),
])
def test_out_of_range_after_zone_shift(value, zone):
    set_timezone(zone)
    with pytest.raises(InvalidDateError):
        format_date("YYYY-MM-dd", value)

def test_range_edges_inside_range():
    set_timezone(timezone.utc)
    assert format_date("YYYY-MM-dd", "0001-01-01") == "0001-01-01"
    assert format_date("YYYY-MM-dd HH", datetime(9999, 12, 31, 23)) == "9999-12-31 23"
