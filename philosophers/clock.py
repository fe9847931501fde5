"""Millisecond clock helpers."""

import time


def now_ms() -> int:
    """Return the current time in whole milliseconds."""
    return time.monotonic_ns() // 1_000_000


def sleep_ms(ms: int) -> None:
    """Sleep for at least ``ms`` milliseconds in short steps."""
    start = now_ms()
    while now_ms() - start < ms:
        time.sleep(0.0005)