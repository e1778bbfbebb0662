"""
datefmt.tokens
--------------
The fixed token table. Each resolver takes the instant, the language
registry and the UTC offset in minutes and returns the substitution text.
"""

from __future__ import annotations
from datetime import datetime
from typing import Callable, Dict, Tuple

from .languages.registry import LanguageRegistry

Resolver = Callable[[datetime, LanguageRegistry, int], str]

def leading_zeroes(value: int, width: int = 2) -> str:
    """Left-pad the decimal form of `value` with zeros to `width` digits."""
    sign = "-" if value < 0 else ""
    return sign + str(abs(value)).rjust(width, "0")

def hour12(hour: int) -> int:
    return hour % 12 or 12

def offset(minutes: int, sep: str) -> str:
    sign = "-" if minutes < 0 else "+"
    hh, mm = divmod(abs(minutes), 60)
    return f"{sign}{leading_zeroes(hh)}{sep}{leading_zeroes(mm)}"

_RESOLVERS: Dict[str, Resolver] = {
    # year
    "YYYY": lambda dt, lang, off: leading_zeroes(dt.year, 4),
    "YY": lambda dt, lang, off: leading_zeroes(dt.year % 100, 2),
    # month
    "MMMM": lambda dt, lang, off: lang.resolve("months", dt),
    "MMM": lambda dt, lang, off: lang.resolve("months_short", dt),
    "MM": lambda dt, lang, off: leading_zeroes(dt.month, 2),
    "M": lambda dt, lang, off: str(dt.month),
    # weekday
    "DDD": lambda dt, lang, off: lang.resolve("weekdays", dt),
    "DD": lambda dt, lang, off: lang.resolve("weekdays_short", dt),
    "D": lambda dt, lang, off: lang.resolve("weekdays_min", dt),
    # day of month
    "dd": lambda dt, lang, off: leading_zeroes(dt.day, 2),
    "d": lambda dt, lang, off: str(dt.day),
    # hour
    "HH": lambda dt, lang, off: leading_zeroes(dt.hour, 2),
    "H": lambda dt, lang, off: str(dt.hour),
    "hh": lambda dt, lang, off: leading_zeroes(hour12(dt.hour), 2),
    "h": lambda dt, lang, off: str(hour12(dt.hour)),
    # minute / second / millisecond
    "mm": lambda dt, lang, off: leading_zeroes(dt.minute, 2),
    "m": lambda dt, lang, off: str(dt.minute),
    "ss": lambda dt, lang, off: leading_zeroes(dt.second, 2),
    "s": lambda dt, lang, off: str(dt.second),
    "ff": lambda dt, lang, off: leading_zeroes(dt.microsecond // 1000, 3),
    "f": lambda dt, lang, off: str(dt.microsecond // 1000),
    # meridiem
    "A": lambda dt, lang, off: lang.meridiem(dt.hour, False),
    "a": lambda dt, lang, off: lang.meridiem(dt.hour, True),
    # offset
    "ZZ": lambda dt, lang, off: offset(off, ""),
    "Z": lambda dt, lang, off: offset(off, ":"),
}

TOKENS: Tuple[str, ...] = tuple(sorted(_RESOLVERS, key=lambda t: (-len(t), t)))
TOKEN_LENGTHS: Tuple[int, ...] = tuple(sorted({len(t) for t in _RESOLVERS}, reverse=True))

def resolver(token: str) -> Resolver:
    if token not in _RESOLVERS:
        raise KeyError(f"Unknown token '{token}'. Available: {list(TOKENS)}")
    return _RESOLVERS[token]

def match(pattern: str, pos: int) -> str:
    """Longest token starting at `pattern[pos]`, or '' when none does."""
    for n in TOKEN_LENGTHS:
        cand = pattern[pos:pos + n]
        if len(cand) == n and cand in _RESOLVERS:
            return cand
    return ""
