from __future__ import annotations
from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

NameFunc = Callable[[datetime], str]
MeridiemFunc = Callable[[int, bool], str]

# Month/day roles take the instant; meridiem takes (hour, lowercase).
NAME_ROLES: Tuple[str, ...] = (
    "months",
    "months_short",
    "weekdays",
    "weekdays_short",
    "weekdays_min",
)
ROLES: Tuple[str, ...] = NAME_ROLES + ("meridiem",)

@dataclass(frozen=True)
class LanguageTable:
    """Locale name resolvers. Any role left as None defers to the default language."""
    months: Optional[NameFunc] = None
    months_short: Optional[NameFunc] = None
    weekdays: Optional[NameFunc] = None
    weekdays_short: Optional[NameFunc] = None
    weekdays_min: Optional[NameFunc] = None
    meridiem: Optional[MeridiemFunc] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LanguageTable":
        unknown = set(data) - set(ROLES)
        if unknown:
            raise KeyError(f"Unknown language role(s) {sorted(unknown)}. Available: {list(ROLES)}")
        for role, fn in data.items():
            if fn is not None and not callable(fn):
                raise TypeError(f"Language role '{role}' must be callable, got {type(fn).__name__}")
        return cls(**dict(data))

    @classmethod
    def from_names(
        cls,
        *,
        months: Optional[Tuple[str, ...]] = None,
        months_short: Optional[Tuple[str, ...]] = None,
        weekdays: Optional[Tuple[str, ...]] = None,
        weekdays_short: Optional[Tuple[str, ...]] = None,
        weekdays_min: Optional[Tuple[str, ...]] = None,
    ) -> "LanguageTable":
        """
        Build a table from plain name lists.

        Month lists are January-first (12 entries), weekday lists are
        Sunday-first (7 entries).
        """
        def by_month(names):
            if names is None:
                return None
            if len(names) != 12:
                raise ValueError(f"Expected 12 month names, got {len(names)}")
            names = tuple(names)
            return lambda dt: names[dt.month - 1]

        def by_weekday(names):
            if names is None:
                return None
            if len(names) != 7:
                raise ValueError(f"Expected 7 weekday names, got {len(names)}")
            names = tuple(names)
            return lambda dt: names[sunday_index(dt)]

        return cls(
            months=by_month(months),
            months_short=by_month(months_short),
            weekdays=by_weekday(weekdays),
            weekdays_short=by_weekday(weekdays_short),
            weekdays_min=by_weekday(weekdays_min),
        )

    def defined_roles(self) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(self) if getattr(self, f.name) is not None)

    def as_dict(self) -> Dict[str, Any]:
        return {role: getattr(self, role) for role in self.defined_roles()}

def sunday_index(dt: datetime) -> int:
    """Day of week with Sunday=0..Saturday=6."""
    return dt.isoweekday() % 7
