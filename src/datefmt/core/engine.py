from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from typing import Any, Iterator, List, Optional, Tuple

from .errors import InvalidFormatError
from .time import MISSING, Clock, normalize_date, utc_now, utc_offset_minutes
from ..formatters import FormatterRegistry
from ..languages.registry import LanguageRegistry
from ..tokens import match, resolver

def scan(pattern: str) -> Iterator[Tuple[str, bool]]:
    """
    Split `pattern` into (text, is_token) segments.

    At each position the longest token wins; anything else is emitted one
    character at a time and adjacent literals are merged.
    """
    pos = 0
    literal: List[str] = []
    while pos < len(pattern):
        tok = match(pattern, pos)
        if tok:
            if literal:
                yield "".join(literal), False
                literal = []
            yield tok, True
            pos += len(tok)
        else:
            literal.append(pattern[pos])
            pos += 1
    if literal:
        yield "".join(literal), False

def render(pattern: str, dt: datetime, languages: LanguageRegistry) -> str:
    off = utc_offset_minutes(dt)
    out = []
    for text, is_token in scan(pattern):
        out.append(resolver(text)(dt, languages, off) if is_token else text)
    return "".join(out)

@dataclass
class FormatContext:
    """
    Everything a formatting call depends on besides its arguments.

    `timezone=None` renders in the system local zone. `clock` supplies the
    instant used when no date is passed.
    """
    languages: LanguageRegistry
    formatters: FormatterRegistry = field(default_factory=FormatterRegistry)
    timezone: Optional[tzinfo] = None
    clock: Clock = utc_now

    def normalize(self, date: Any = MISSING) -> datetime:
        return normalize_date(date, tz=self.timezone, clock=self.clock)

    def format(self, fmt: Any, date: Any = MISSING) -> str:
        if not isinstance(fmt, str):
            raise InvalidFormatError()
        dt = self.normalize(date)
        return render(self.formatters.resolve(fmt), dt, self.languages)
