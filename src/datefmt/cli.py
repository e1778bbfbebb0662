from __future__ import annotations

import argparse
from datetime import timezone, tzinfo
import logging
import re
import sys
from typing import Any, Optional

_TS_RE = re.compile(r"^[+-]?\d+(\.\d+)?$")
_COMMANDS = ("format", "formats", "tokens", "languages")


def _parse_date(s: Optional[str]) -> Any:
    from datefmt.core.time import MISSING

    if s is None:
        return MISSING
    if _TS_RE.match(s):
        return float(s) if "." in s else int(s)
    return s


def _parse_tz(s: Optional[str]) -> Optional[tzinfo]:
    if s is None or s == "local":
        return None
    if s.upper() == "UTC":
        return timezone.utc
    from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

    try:
        return ZoneInfo(s)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"unknown timezone '{s}'") from e


def cmd_format(argv: list[str]) -> int:
    import datefmt

    p = argparse.ArgumentParser(prog="datefmt format", description="Render a date with a pattern or formatter name")
    p.add_argument("pattern", help="pattern (e.g. 'YYYY-MM-dd') or formatter name (e.g. ISODate)")
    p.add_argument("date", nargs="?", help="ISO-8601 string or Unix timestamp in milliseconds (default: now)")
    p.add_argument("--lang", default=None, help="language name")
    p.add_argument("--tz", default=None, help="UTC, local or an IANA zone key (default: local)")
    p.add_argument("--explain", action="store_true", help="print the token segmentation")
    args = p.parse_args(argv)

    try:
        datefmt.set_timezone(_parse_tz(args.tz))
    except ValueError as e:
        print(f"datefmt: error: {e}", file=sys.stderr)
        return 2
    if args.lang is not None:
        active = datefmt.select_language(args.lang)
        if active != args.lang:
            print(f"datefmt: warning: unknown language '{args.lang}', using '{active}'", file=sys.stderr)

    try:
        out = datefmt.format_date(args.pattern, _parse_date(args.date))
    except datefmt.DatefmtError as e:
        print(f"datefmt: error: {e}", file=sys.stderr)
        return 2

    if args.explain:
        ctx = datefmt.get_context()
        for text, is_token in datefmt.scan(ctx.formatters.resolve(args.pattern)):
            kind = "token" if is_token else "text"
            print(f"{kind:6s}{text!r}")
        print()
    print(out)
    return 0


def cmd_formats(argv: list[str]) -> int:
    import datefmt

    argparse.ArgumentParser(prog="datefmt formats", description="List formatter names").parse_args(argv)
    ctx = datefmt.get_context()
    for name in ctx.formatters.names():
        print(f"{name:16s}{ctx.formatters.get(name)}")
    return 0


def cmd_tokens(argv: list[str]) -> int:
    import datefmt

    argparse.ArgumentParser(prog="datefmt tokens", description="List supported tokens").parse_args(argv)
    for tok in datefmt.TOKENS:
        print(tok)
    return 0


def cmd_languages(argv: list[str]) -> int:
    import datefmt

    argparse.ArgumentParser(prog="datefmt languages", description="List language names").parse_args(argv)
    current = datefmt.select_language()
    for name in datefmt.list_languages():
        print(f"{'*' if name == current else ' '} {name}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `datefmt PATTERN [DATE]`
    if argv and argv[0] not in _COMMANDS and not argv[0].startswith("-"):
        return cmd_format(argv)

    p = argparse.ArgumentParser(prog="datefmt", description="Token based date formatting.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)
    sub.add_parser("format", help="Render a date with a pattern or formatter name")
    sub.add_parser("formats", help="List formatter names")
    sub.add_parser("tokens", help="List supported tokens")
    sub.add_parser("languages", help="List language names")

    args, rest = p.parse_known_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "format":
        return cmd_format(rest)
    if args.cmd == "formats":
        return cmd_formats(rest)
    if args.cmd == "tokens":
        return cmd_tokens(rest)
    if args.cmd == "languages":
        return cmd_languages(rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
