"""Clock adapters implementing :class:`ClockPort`."""

from __future__ import annotations

from datetime import datetime

from logux_reporter.application.ports.time import ClockPort


class SystemClock(ClockPort):
    """Return the current local time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock(ClockPort):
    """Return the same instant on every call; used for reproducible output.

    Examples
    --------
    >>> clock = FixedClock(datetime(2016, 7, 14, 23, 14, 5))
    >>> clock.now() == clock.now()
    True
    """

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant


__all__ = ["FixedClock", "SystemClock"]
