"""Time utility helpers for UTC-safe timestamps."""

from __future__ import annotations

import time
from datetime import datetime, timezone


def now_utc() -> datetime:
    """Return current timezone-aware UTC timestamp."""

    return datetime.now(timezone.utc)


def current_year() -> int:
    """Return the current UTC calendar year, the default puzzle year."""

    return now_utc().year


def elapsed_ms(started: float) -> float:
    """Milliseconds elapsed since a ``time.perf_counter()`` reading."""

    return (time.perf_counter() - started) * 1000.0
