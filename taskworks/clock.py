"""Wall-clock time in microseconds."""

from __future__ import annotations

import time

__all__ = ["now_us"]


def now_us():
    """Return the current time as whole microseconds since the Unix epoch."""
    return time.time_ns() // 1000