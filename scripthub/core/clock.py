"""Wall-clock helpers for record timestamps."""

from __future__ import annotations

import time


def now_ns() -> int:
    """Current time as integer nanoseconds since the Unix epoch."""
    return time.time_ns()


def advance(previous: int) -> int:
    """Return a timestamp strictly later than ``previous``, even if the clock stepped back."""
    return max(now_ns(), previous + 1)


__all__ = ["now_ns", "advance"]
