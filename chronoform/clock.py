"""Clock capability for reading the current moment.

Value types never read the process clock on their own: ``today()`` and
``now()`` take a Clock, falling back to SystemClock when none is given.
Tests inject a FixedClock to stay deterministic.
"""

from __future__ import annotations

import datetime as _datetime
from typing import Protocol, runtime_checkable

from chronoform.core.datetime import DateTime


@runtime_checkable
class Clock(Protocol):
    """Anything that can report the current local date and time."""

    def now(self) -> DateTime: ...


class SystemClock:
    """Clock backed by the operating system's local wall time.

    Examples:
        >>> SystemClock().now().year >= 2024
        True
    """

    __slots__ = ()

    def now(self) -> DateTime:
        now = _datetime.datetime.now()
        return DateTime(
            now.year,
            now.month,
            now.day,
            now.hour,
            now.minute,
            now.second,
            microsecond=now.microsecond,
        )

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """Clock that always reports the same moment.

    Examples:
        >>> clock = FixedClock(DateTime(1974, 11, 14, 16, 21))
        >>> clock.now()
        DateTime(1974, 11, 14, 16, 21, 0, 0)
    """

    __slots__ = ("_value",)

    def __init__(self, value: DateTime) -> None:
        if not isinstance(value, DateTime):
            raise TypeError(f"FixedClock requires a DateTime, got {type(value).__name__}")
        self._value = value

    def now(self) -> DateTime:
        return self._value

    def __repr__(self) -> str:
        return f"FixedClock({self._value!r})"


__all__ = ["Clock", "SystemClock", "FixedClock"]
