from __future__ import annotations

from datetime import tzinfo
from typing import Any, List, Optional

from .core.engine import FormatContext
from .core.time import MISSING
from .languages.registry import TableLike

_context: Optional[FormatContext] = None

def set_context(ctx: FormatContext) -> None:
    global _context
    _context = ctx

def get_context() -> FormatContext:
    if _context is None:
        raise RuntimeError("Format context not initialized")
    return _context

def format_date(fmt: Any, date: Any = MISSING) -> str:
    """
    Render `date` (default: now) with the pattern or formatter name `fmt`.

    `date` may be a datetime, a date, a Unix timestamp in milliseconds or an
    ISO-8601 string. Raises InvalidFormatError / InvalidDateError.
    """
    return get_context().format(fmt, date)

def register_format(name: str, pattern: str) -> None:
    get_context().formatters.register(name, pattern)

def list_formats() -> List[str]:
    return get_context().formatters.names()

def select_language(name: Optional[str] = None) -> str:
    return get_context().languages.select(name)

def register_language(name: str, table: TableLike) -> None:
    get_context().languages.register(name, table)

def list_languages() -> List[str]:
    return get_context().languages.names()

def set_timezone(tz: Optional[tzinfo]) -> None:
    """Zone used to render instants; None means the system local zone."""
    get_context().timezone = tz

def get_timezone() -> Optional[tzinfo]:
    return get_context().timezone
