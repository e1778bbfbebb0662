"""Language tables for month, weekday and meridiem names."""
from .registry import DEFAULT_LANGUAGE, LanguageRegistry
from .standard import ENGLISH

__all__ = ["DEFAULT_LANGUAGE", "LanguageRegistry", "ENGLISH"]
