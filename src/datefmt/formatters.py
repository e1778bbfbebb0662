from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, List

log = logging.getLogger(__name__)

BUILTIN_FORMATS: Dict[str, str] = {
    "ISODate": "YYYY-MM-dd",
    "ISOTime": "HH:mm:ss",
    "ISODateTime": "YYYY-MM-ddTHH:mm:ss",
    "ISODateTimeTZ": "YYYY-MM-ddTHH:mm:ssZ",
}

@dataclass
class FormatterRegistry:
    _formats: Dict[str, str] = field(default_factory=lambda: dict(BUILTIN_FORMATS))

    def register(self, name: str, pattern: str) -> None:
        if not isinstance(name, str):
            raise TypeError(f"Formatter name must be a string, got {type(name).__name__}")
        if not isinstance(pattern, str):
            raise TypeError(f"Formatter pattern must be a string, got {type(pattern).__name__}")
        self._formats[name] = pattern
        log.debug("registered formatter %r -> %r", name, pattern)

    def names(self) -> List[str]:
        return sorted(self._formats)

    def get(self, name: str) -> str:
        if name not in self._formats:
            raise KeyError(f"Unknown formatter '{name}'. Available: {self.names()}")
        return self._formats[name]

    def resolve(self, fmt: str) -> str:
        """
        Replace a formatter name by its pattern.

        Patterns that are themselves formatter names are followed, so an
        alias renders exactly like its target. On a cycle the first
        repeated name is returned as a literal pattern.
        """
        seen = set()
        while fmt in self._formats and fmt not in seen:
            seen.add(fmt)
            fmt = self._formats[fmt]
        if fmt in seen:
            log.debug("formatter cycle at %r; using it literally", fmt)
        return fmt
