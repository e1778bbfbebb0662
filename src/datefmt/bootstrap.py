from __future__ import annotations
from datetime import tzinfo
from typing import Optional

from datefmt.core.engine import FormatContext
from datefmt.core.time import Clock, utc_now
from datefmt.formatters import FormatterRegistry
from datefmt.languages.registry import LanguageRegistry
from datefmt.languages.standard import ENGLISH

def build_context(*, timezone: Optional[tzinfo] = None, clock: Clock = utc_now) -> FormatContext:
    """A fresh context seeded with English and the built-in formatters."""
    return FormatContext(
        languages=LanguageRegistry(ENGLISH),
        formatters=FormatterRegistry(),
        timezone=timezone,
        clock=clock,
    )
