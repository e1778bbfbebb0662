"""datefmt public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""
import logging

# Install the default context on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    format_date,
    register_format,
    list_formats,
    select_language,
    register_language,
    list_languages,
    set_timezone,
    get_timezone,
    get_context,
    set_context,
)
from .bootstrap import build_context
from .core.engine import FormatContext, scan
from .core.errors import DatefmtError, InvalidDateError, InvalidFormatError
from .core.time import MISSING
from .core.types import LanguageTable
from .tokens import TOKENS, leading_zeroes

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "format_date",
    "register_format",
    "list_formats",
    "select_language",
    "register_language",
    "list_languages",
    "set_timezone",
    "get_timezone",
    "get_context",
    "set_context",
    "build_context",
    "FormatContext",
    "LanguageTable",
    "MISSING",
    "TOKENS",
    "scan",
    "leading_zeroes",
    "DatefmtError",
    "InvalidDateError",
    "InvalidFormatError",
]
