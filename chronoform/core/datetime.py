"""DateTime class combining a calendar date and a time of day.

This module provides the DateTime class: one CalendarDate and one
TimeOfDay owned together as a single immutable value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chronoform.core.date import CalendarDate
from chronoform.core.time import TimeOfDay, _format_fraction
from chronoform.errors import ParseMismatchError
from chronoform.units.field import Field

if TYPE_CHECKING:
    from chronoform.clock import Clock
    from chronoform.format.formatter import PatternFormatter

_ALL_FIELDS: frozenset[Field] = frozenset(Field)


class DateTime:
    """A combined calendar date and time of day.

    DateTime has no timezone; it names a local wall-clock moment.
    Neither the date nor the time part can change once constructed;
    use replace() to derive a new value.

    Attributes:
        year, month, day: The calendar date components.
        hour, minute, second, nanosecond: The time of day components.

    Examples:
        >>> dt = DateTime(1955, 11, 5, 13, 0, 0)
        >>> dt.year, dt.hour
        (1955, 13)

        >>> dt.date()
        CalendarDate(1955, 11, 5)
    """

    __slots__ = ("_date", "_time")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
        *,
        millisecond: int = 0,
        microsecond: int = 0,
    ) -> None:
        """Create a DateTime from component parts.

        Args:
            year: The year (1-9999).
            month: The month (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: The sub-second fraction (0-999999999).
            millisecond: The millisecond (0-999). Added to nanosecond.
            microsecond: The microsecond (0-999999). Added to nanosecond.

        Raises:
            InvalidDateValueError: If any component is out of range.

        Examples:
            >>> DateTime(1955, 11, 5, 13, 0, 0)
            DateTime(1955, 11, 5, 13, 0, 0, 0)
        """
        self._date: CalendarDate = CalendarDate(year, month, day)
        self._time: TimeOfDay = TimeOfDay(
            hour,
            minute,
            second,
            nanosecond,
            millisecond=millisecond,
            microsecond=microsecond,
        )

    @classmethod
    def combine(cls, date: CalendarDate, time: TimeOfDay) -> DateTime:
        """Create a DateTime from a CalendarDate and a TimeOfDay.

        Raises:
            TypeError: If either argument has the wrong type.

        Examples:
            >>> DateTime.combine(CalendarDate(1974, 11, 14), TimeOfDay(16, 21))
            DateTime(1974, 11, 14, 16, 21, 0, 0)
        """
        if not isinstance(date, CalendarDate):
            raise TypeError(f"date must be a CalendarDate, got {type(date).__name__}")
        if not isinstance(time, TimeOfDay):
            raise TypeError(f"time must be a TimeOfDay, got {type(time).__name__}")
        instance = object.__new__(cls)
        instance._date = date
        instance._time = time
        return instance

    @classmethod
    def now(cls, clock: Clock | None = None) -> DateTime:
        """Return the current local date and time as read from a clock.

        Args:
            clock: Clock to read. Defaults to the system clock.
        """
        from chronoform.clock import SystemClock

        if clock is None:
            clock = SystemClock()
        return clock.now()

    @classmethod
    def parse(cls, text: str, pattern: str | PatternFormatter) -> DateTime:
        """Parse a date and time from text.

        The pattern must determine both a date and a time of day.

        Raises:
            ParseMismatchError: If the text does not match the pattern,
                or the pattern lacks date or time fields.
            InvalidDateValueError: If a field is out of range.

        Examples:
            >>> DateTime.parse("1974-11-14 16:21", "yyyy-MM-dd HH:mm")
            DateTime(1974, 11, 14, 16, 21, 0, 0)
        """
        from chronoform.format import resolve_formatter

        formatter = resolve_formatter(pattern)
        result = formatter.parse(text)
        if not isinstance(result, DateTime):
            raise ParseMismatchError(
                f"pattern {formatter.pattern!r} does not determine both a date and a time"
            )
        return result

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> int:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def day_of_week(self) -> int:
        """Return the day of the week (0=Monday, 6=Sunday)."""
        return self._date.day_of_week

    @property
    def day_of_year(self) -> int:
        return self._date.day_of_year

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def millisecond(self) -> int:
        return self._time.millisecond

    @property
    def microsecond(self) -> int:
        return self._time.microsecond

    @property
    def nanosecond(self) -> int:
        return self._time.nanosecond

    def date(self) -> CalendarDate:
        """Return the date component."""
        return self._date

    def time(self) -> TimeOfDay:
        """Return the time component."""
        return self._time

    def supported_fields(self) -> frozenset[Field]:
        """Return the fields this value can render (all of them)."""
        return _ALL_FIELDS

    def get(self, field: Field) -> int:
        """Return the value of any date or time field.

        Examples:
            >>> DateTime(1955, 11, 5, 13).get(Field.CLOCK_HOUR_OF_AMPM)
            1
        """
        if field.is_date_based:
            return self._date.get(field)
        return self._time.get(field)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        nanosecond: int | None = None,
    ) -> DateTime:
        """Return a new DateTime with specified components replaced.

        Raises:
            InvalidDateValueError: If the result is invalid.

        Examples:
            >>> DateTime(1955, 11, 5, 13).replace(year=1985, minute=22)
            DateTime(1985, 11, 5, 13, 22, 0, 0)
        """
        return DateTime.combine(
            self._date.replace(year, month, day),
            self._time.replace(hour, minute, second, nanosecond),
        )

    def format(self, pattern: str | PatternFormatter) -> str:
        """Format the date and time with a pattern.

        Examples:
            >>> DateTime(1955, 11, 5, 13).format("MM/dd/yyyy")
            '11/05/1955'
        """
        from chronoform.format import resolve_formatter

        return resolve_formatter(pattern).format(self)

    def to_iso_format(self, *, precision: str = "auto") -> str:
        """Return the datetime as an ISO 8601 string.

        Args:
            precision: Subsecond precision, as for TimeOfDay.to_iso_format.

        Examples:
            >>> DateTime(2024, 1, 15, 14, 30, 45).to_iso_format()
            '2024-01-15T14:30:45'
        """
        time = self._time
        return (
            f"{self._date}T{time.hour:02d}:{time.minute:02d}:{time.second:02d}"
            + _format_fraction(time.nanosecond, precision)
        )

    def _key(self) -> tuple[int, int]:
        return (self._date.to_ordinal(), self._time.total_nanoseconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        d, t = self._date, self._time
        return (
            f"DateTime({d.year}, {d.month}, {d.day}, "
            f"{t.hour}, {t.minute}, {t.second}, {t.nanosecond})"
        )

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["DateTime"]
