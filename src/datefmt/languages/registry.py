from __future__ import annotations
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Union

from ..core.types import NAME_ROLES, ROLES, LanguageTable

log = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

TableLike = Union[LanguageTable, Mapping[str, Any]]

@dataclass
class LanguageRegistry:
    """
    Named language tables plus the current selection.

    The default table must define every role; a role missing from the
    active table is looked up in the default one.
    """
    default: LanguageTable
    default_name: str = DEFAULT_LANGUAGE
    _tables: Dict[str, LanguageTable] = field(default_factory=dict)
    _current: str = ""

    def __post_init__(self) -> None:
        missing = [r for r in ROLES if getattr(self.default, r) is None]
        if missing:
            raise ValueError(f"Default language '{self.default_name}' is missing roles {missing}")
        self._tables[self.default_name] = self.default
        if not self._current:
            self._current = self.default_name

    @property
    def current(self) -> str:
        return self._current

    @property
    def active(self) -> LanguageTable:
        return self._tables[self._current]

    def names(self) -> List[str]:
        return sorted(self._tables)

    def table(self, name: str) -> LanguageTable:
        if name not in self._tables:
            raise KeyError(f"Unknown language '{name}'. Available: {self.names()}")
        return self._tables[name]

    def register(self, name: str, table: TableLike) -> None:
        if not isinstance(name, str):
            raise TypeError(f"Language name must be a string, got {type(name).__name__}")
        if not name:
            raise ValueError("Language name must not be empty")
        if not isinstance(table, LanguageTable):
            table = LanguageTable.from_mapping(table)
        if name == self.default_name:
            # the default must stay complete
            table = LanguageTable(**{**self.default.as_dict(), **table.as_dict()})
            self.default = table
        self._tables[name] = table
        log.debug("registered language %r (roles: %s)", name, ", ".join(table.defined_roles()) or "none")

    def select(self, name: Optional[str] = None) -> str:
        if name is None:
            return self._current
        if name in self._tables:
            self._current = name
        else:
            log.debug("language %r is not registered; keeping %r", name, self._current)
        return self._current

    def resolve(self, role: str, dt: datetime) -> str:
        if role not in NAME_ROLES:
            raise KeyError(f"Unknown name role '{role}'. Available: {list(NAME_ROLES)}")
        fn = getattr(self.active, role) or getattr(self.default, role)
        return fn(dt)

    def meridiem(self, hour: int, lowercase: bool = False) -> str:
        fn = self.active.meridiem or self.default.meridiem
        return fn(hour, lowercase)
