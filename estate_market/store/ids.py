"""Clock and identifier helpers for persisted entities."""

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class IdFactory:
    """Time-derived identifiers that strictly increase within a process.

    Ids are millisecond timestamps rendered as strings. When two ids are
    requested within the same millisecond (or the clock goes backwards) the
    previous value is bumped by one.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or utc_now
        self._last = 0

    def __call__(self) -> str:
        millis = int(self._clock().timestamp() * 1000)
        if millis <= self._last:
            millis = self._last + 1
        self._last = millis
        return str(millis)
