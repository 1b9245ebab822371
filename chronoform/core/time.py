"""TimeOfDay class representing a time of day.

This module provides the TimeOfDay class for representing time-of-day
values with nanosecond precision.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chronoform._internal.constants import (
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from chronoform._internal.validation import require_int, validate_bounds
from chronoform.errors import ParseMismatchError, UnsupportedFieldError
from chronoform.units.field import TIME_FIELDS, Field

if TYPE_CHECKING:
    from chronoform.clock import Clock
    from chronoform.format.formatter import PatternFormatter


class TimeOfDay:
    """A time of day with nanosecond precision.

    TimeOfDay represents the time portion of a day, from midnight
    (00:00:00) to just before the next midnight (23:59:59.999999999).
    It carries no date and no timezone.

    The internal representation stores the total nanoseconds since
    midnight in a single `_nanos` slot.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        nanosecond: The sub-second fraction in nanoseconds (0-999999999).

    Examples:
        >>> t = TimeOfDay(16, 21)
        >>> t.hour, t.minute, t.second
        (16, 21, 0)

        >>> TimeOfDay(12, 0, 0, 123_456_789).microsecond
        123456
    """

    __slots__ = ("_nanos",)

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
        *,
        millisecond: int = 0,
        microsecond: int = 0,
    ) -> None:
        """Create a TimeOfDay from component parts.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: The sub-second fraction (0-999999999).
            millisecond: The millisecond (0-999). Added to nanosecond.
            microsecond: The microsecond (0-999999). Added to nanosecond.

        Raises:
            InvalidDateValueError: If any component is out of range, or
                the sub-second parts add up to a full second or more.
            TypeError: If a component is not an int.

        Examples:
            >>> TimeOfDay(16, 21, 0, 0)
            TimeOfDay(16, 21, 0, 0)

            >>> TimeOfDay(12, 0, 0, millisecond=500)
            TimeOfDay(12, 0, 0, 500000000)
        """
        for name, value in (
            ("hour", hour),
            ("minute", minute),
            ("second", second),
            ("nanosecond", nanosecond),
            ("millisecond", millisecond),
            ("microsecond", microsecond),
        ):
            require_int(name, value)

        validate_bounds("hour", hour, 0, 23)
        validate_bounds("minute", minute, 0, 59)
        validate_bounds("second", second, 0, 59)
        validate_bounds("millisecond", millisecond, 0, 999)
        validate_bounds("microsecond", microsecond, 0, 999_999)
        validate_bounds("nanosecond", nanosecond, 0, 999_999_999)

        fraction = (
            millisecond * NANOS_PER_MILLISECOND
            + microsecond * NANOS_PER_MICROSECOND
            + nanosecond
        )
        validate_bounds("sub-second fraction", fraction, 0, NANOS_PER_SECOND - 1)

        self._nanos: int = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + fraction
        )

    @classmethod
    def _from_nanos(cls, nanos: int) -> TimeOfDay:
        """Create a TimeOfDay from nanoseconds since midnight.

        Bypasses validation; nanos must be in [0, NANOS_PER_DAY).
        """
        instance = object.__new__(cls)
        instance._nanos = nanos
        return instance

    @classmethod
    def now(cls, clock: Clock | None = None) -> TimeOfDay:
        """Return the current time of day as read from a clock.

        Args:
            clock: Clock to read. Defaults to the system clock.
        """
        from chronoform.clock import SystemClock

        if clock is None:
            clock = SystemClock()
        return clock.now().time()

    @classmethod
    def midnight(cls) -> TimeOfDay:
        """Return a TimeOfDay representing midnight (00:00:00)."""
        return cls._from_nanos(0)

    @classmethod
    def noon(cls) -> TimeOfDay:
        """Return a TimeOfDay representing noon (12:00:00)."""
        return cls._from_nanos(12 * NANOS_PER_HOUR)

    @classmethod
    def parse(cls, text: str, pattern: str | PatternFormatter) -> TimeOfDay:
        """Parse a time of day from text.

        With a pattern that also carries date fields, the time part of
        the parsed DateTime is returned.

        Raises:
            ParseMismatchError: If the text does not match the pattern,
                or the pattern cannot determine a time of day.
            InvalidDateValueError: If a field is out of range.

        Examples:
            >>> TimeOfDay.parse("16:21", "HH:mm")
            TimeOfDay(16, 21, 0, 0)
        """
        from chronoform.core.datetime import DateTime
        from chronoform.format import resolve_formatter

        formatter = resolve_formatter(pattern)
        result = formatter.parse(text)
        if isinstance(result, DateTime):
            return result.time()
        if not isinstance(result, TimeOfDay):
            raise ParseMismatchError(
                f"pattern {formatter.pattern!r} does not determine a time of day"
            )
        return result

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return (self._nanos % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return (self._nanos % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def millisecond(self) -> int:
        """Return the milliseconds within the current second (0-999)."""
        return (self._nanos % NANOS_PER_SECOND) // NANOS_PER_MILLISECOND

    @property
    def microsecond(self) -> int:
        """Return the microseconds within the current second (0-999999)."""
        return (self._nanos % NANOS_PER_SECOND) // NANOS_PER_MICROSECOND

    @property
    def nanosecond(self) -> int:
        """Return the nanoseconds within the current second (0-999999999)."""
        return self._nanos % NANOS_PER_SECOND

    @property
    def total_nanoseconds(self) -> int:
        """Return the total nanoseconds since midnight."""
        return self._nanos

    def supported_fields(self) -> frozenset[Field]:
        """Return the fields this value can render."""
        return TIME_FIELDS

    def get(self, field: Field) -> int:
        """Return the value of a time field.

        Args:
            field: The field to read.

        Returns:
            The field value; see Field.value_range for the units.

        Raises:
            UnsupportedFieldError: If field is a calendar date field.

        Examples:
            >>> TimeOfDay(0, 30).get(Field.CLOCK_HOUR_OF_AMPM)
            12
            >>> TimeOfDay(16, 21).get(Field.AMPM)
            1
        """
        hour = self.hour
        if field is Field.HOUR_OF_DAY:
            return hour
        if field is Field.CLOCK_HOUR_OF_DAY:
            return hour if hour != 0 else 24
        if field is Field.HOUR_OF_AMPM:
            return hour % 12
        if field is Field.CLOCK_HOUR_OF_AMPM:
            return hour % 12 or 12
        if field is Field.AMPM:
            return 1 if hour >= 12 else 0
        if field is Field.MINUTE:
            return self.minute
        if field is Field.SECOND:
            return self.second
        if field is Field.FRACTION:
            return self.nanosecond
        raise UnsupportedFieldError(
            f"{type(self).__name__} has no {field.value} field"
        )

    def replace(
        self,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        nanosecond: int | None = None,
    ) -> TimeOfDay:
        """Return a new TimeOfDay with specified components replaced.

        Examples:
            >>> TimeOfDay(14, 30, 45).replace(minute=0, second=0)
            TimeOfDay(14, 0, 0, 0)
        """
        return TimeOfDay(
            hour if hour is not None else self.hour,
            minute if minute is not None else self.minute,
            second if second is not None else self.second,
            nanosecond if nanosecond is not None else self.nanosecond,
        )

    def format(self, pattern: str | PatternFormatter) -> str:
        """Format the time with a pattern.

        Raises:
            UnsupportedFieldError: If the pattern references date fields.

        Examples:
            >>> TimeOfDay(16, 21).format("h:mm a")
            '4:21 PM'
        """
        from chronoform.format import resolve_formatter

        return resolve_formatter(pattern).format(self)

    def to_iso_format(self, *, precision: str = "auto") -> str:
        """Return the time as an ISO 8601 string.

        Args:
            precision: Subsecond precision to include:
                - "auto": Include subseconds only if non-zero, minimal digits
                - "seconds": No subseconds (HH:MM:SS)
                - "millis": Always 3 decimal places
                - "micros": Always 6 decimal places
                - "nanos": Always 9 decimal places

        Examples:
            >>> TimeOfDay(14, 30, 45).to_iso_format()
            '14:30:45'

            >>> TimeOfDay(14, 30, 45, 123_000_000).to_iso_format()
            '14:30:45.123'
        """
        base = f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        return base + _format_fraction(self.nanosecond, precision)

    def __eq__(self, other: object) -> bool:
        """Check equality with another TimeOfDay."""
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        """Check if this time is earlier (closer to midnight) than another."""
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        return f"TimeOfDay({self.hour}, {self.minute}, {self.second}, {self.nanosecond})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Times are always truthy, midnight included."""
        return True


def _format_fraction(nanosecond: int, precision: str) -> str:
    """Render the fractional-second suffix for to_iso_format.

    Raises:
        ValueError: If precision is not a known option.
    """
    if precision == "seconds":
        return ""
    elif precision == "millis":
        return f".{nanosecond // 1_000_000:03d}"
    elif precision == "micros":
        return f".{nanosecond // 1_000:06d}"
    elif precision == "nanos":
        return f".{nanosecond:09d}"
    elif precision == "auto":
        if nanosecond == 0:
            return ""
        return "." + f"{nanosecond:09d}".rstrip("0")
    raise ValueError(
        f"unknown precision {precision!r}; expected auto, seconds, millis, micros or nanos"
    )


__all__ = ["TimeOfDay"]
