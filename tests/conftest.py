# tests/conftest.py

from datetime import datetime, timezone

import pytest

import datefmt

# 2024-02-05T01:02:03.004Z, a Monday
NOW = datetime(2024, 2, 5, 1, 2, 3, 4000, tzinfo=timezone.utc)

@pytest.fixture(autouse=True)
def ctx():
    """
    Fresh default context per test: frozen clock, rendered in UTC.
    The previous process-wide context is restored afterwards.
    """
    previous = datefmt.get_context()
    fresh = datefmt.build_context(timezone=timezone.utc, clock=lambda: NOW)
    datefmt.set_context(fresh)
    yield fresh
    datefmt.set_context(previous)
