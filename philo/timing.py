"""Millisecond clock and sleep helpers."""

from __future__ import annotations

import time


def now_ms() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def sleep_ms(ms: int) -> None:
    """Sleep for at least ``ms`` milliseconds, waking often to re-check."""
    start = now_ms()
    step = ms / 10 / 1_000_000
    while now_ms() - start < ms:
        time.sleep(step)