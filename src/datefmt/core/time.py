from __future__ import annotations
import math
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any, Callable, Optional

from .errors import InvalidDateError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

class _Missing:
    """Sentinel for an omitted `date` argument (None is rejected)."""
    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

MISSING: Any = _Missing()

Clock = Callable[[], datetime]

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

def localize(dt: datetime, tz: Optional[tzinfo]) -> datetime:
    """
    Express `dt` in `tz` (system local time when tz is None).

    Naive datetimes are read as wall-clock time in that zone. Instants that
    leave the datetime range once shifted raise InvalidDateError.
    """
    try:
        if dt.tzinfo is None or dt.utcoffset() is None:
            if tz is None:
                return dt.astimezone()
            return dt.replace(tzinfo=tz)
        return dt.astimezone(tz)
    except OverflowError as e:
        raise InvalidDateError() from e

def from_timestamp_ms(ms: float, tz: Optional[tzinfo] = None) -> datetime:
    """Unix timestamp in milliseconds -> aware datetime in `tz`."""
    try:
        return localize(EPOCH + timedelta(milliseconds=ms), tz)
    except (OverflowError, ValueError) as e:
        raise InvalidDateError() from e

def parse_iso(s: str, tz: Optional[tzinfo] = None) -> datetime:
    """
    Parse an ISO-8601 string with the standard library parser.

    A date-only string is midnight UTC; a date-time without an offset is
    wall-clock time in `tz`.
    """
    s = s.strip()
    try:
        if len(s) <= 10:
            d = date.fromisoformat(s)
            return localize(datetime(d.year, d.month, d.day, tzinfo=timezone.utc), tz)
        return localize(datetime.fromisoformat(s), tz)
    except ValueError as e:
        raise InvalidDateError() from e

def normalize_date(
    value: Any = MISSING,
    *,
    tz: Optional[tzinfo] = None,
    clock: Optional[Clock] = None,
) -> datetime:
    if value is MISSING:
        return localize((clock or utc_now)(), tz)
    if isinstance(value, datetime):
        return localize(value, tz)
    if isinstance(value, date):
        return localize(datetime(value.year, value.month, value.day), tz)
    # bool is an int subclass but never a timestamp
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if not math.isfinite(value):
            raise InvalidDateError()
        return from_timestamp_ms(value, tz)
    if isinstance(value, str):
        return parse_iso(value, tz)
    raise InvalidDateError()

def utc_offset_minutes(dt: datetime) -> int:
    off = dt.utcoffset()
    if off is None:
        return 0
    # truncate toward zero so LMT offsets like -4:56:02 read -04:56
    return int(off.total_seconds() / 60)
