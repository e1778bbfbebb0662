from __future__ import annotations

from ..core.types import LanguageTable

def english_meridiem(hour: int, lowercase: bool) -> str:
    s = "AM" if hour < 12 else "PM"
    return s.lower() if lowercase else s

_ENGLISH_NAMES = LanguageTable.from_names(
    months=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    months_short=(
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
    weekdays=("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
    weekdays_short=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
    weekdays_min=("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"),
)

ENGLISH = LanguageTable(**_ENGLISH_NAMES.as_dict(), meridiem=english_meridiem)
