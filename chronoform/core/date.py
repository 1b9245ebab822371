"""CalendarDate class representing a calendar date.

This module provides the CalendarDate class for representing calendar
dates in the proleptic Gregorian calendar, years 1 through 9999.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chronoform._internal.calendar import (
    days_before_month,
    is_leap_year,
    ordinal_to_day_of_week,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from chronoform._internal.constants import MAX_YEAR, MIN_YEAR
from chronoform._internal.validation import (
    require_int,
    validate_bounds,
    validate_day,
    validate_month,
    validate_year,
)
from chronoform.errors import ParseMismatchError, UnsupportedFieldError
from chronoform.units.field import DATE_FIELDS, Field

if TYPE_CHECKING:
    from chronoform.clock import Clock
    from chronoform.format.formatter import PatternFormatter


class CalendarDate:
    """A calendar date in the proleptic Gregorian calendar.

    CalendarDate represents a specific calendar day with year, month,
    and day components. Instances always name a real date: February
    30th or month 13 are rejected at construction.

    Internal representation is the ordinal day number (1 = 0001-01-01),
    which makes comparison and weekday computation cheap.

    Attributes:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = CalendarDate(1974, 11, 14)
        >>> d.year
        1974
        >>> str(d)
        '1974-11-14'

        >>> CalendarDate(2024, 2, 29)  # Valid leap year date
        CalendarDate(2024, 2, 29)
    """

    __slots__ = ("_ordinal",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a CalendarDate from year, month, and day.

        Args:
            year: The year (1-9999).
            month: The month (1-12).
            day: The day of the month.

        Raises:
            InvalidDateValueError: If any component is out of range.
            TypeError: If a component is not an int.

        Examples:
            >>> CalendarDate(2023, 2, 30)  # February doesn't have 30 days
            Traceback (most recent call last):
            ...
            InvalidDateValueError: day must be between 1 and 28 for 2023-02, got 30
        """
        require_int("year", year)
        require_int("month", month)
        require_int("day", day)
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._ordinal: int = ymd_to_ordinal(year, month, day)

    @classmethod
    def today(cls, clock: Clock | None = None) -> CalendarDate:
        """Return the current date as read from a clock.

        Args:
            clock: Clock to read. Defaults to the system clock.

        Returns:
            A CalendarDate representing the current day.
        """
        from chronoform.clock import SystemClock

        if clock is None:
            clock = SystemClock()
        return clock.now().date()

    @classmethod
    def from_ordinal(cls, ordinal: int) -> CalendarDate:
        """Create a CalendarDate from an ordinal day number.

        Args:
            ordinal: Days since year 1, where 1 = 0001-01-01.

        Returns:
            The corresponding CalendarDate.

        Raises:
            InvalidDateValueError: If the ordinal is outside years 1-9999.

        Examples:
            >>> CalendarDate.from_ordinal(1)
            CalendarDate(1, 1, 1)
        """
        max_ordinal = ymd_to_ordinal(MAX_YEAR, 12, 31)
        validate_bounds("ordinal", ordinal, ymd_to_ordinal(MIN_YEAR, 1, 1), max_ordinal)
        return cls._from_ordinal(ordinal)

    @classmethod
    def _from_ordinal(cls, ordinal: int) -> CalendarDate:
        """Create a CalendarDate from an ordinal known to be in range."""
        instance = object.__new__(cls)
        instance._ordinal = ordinal
        return instance

    @classmethod
    def parse(cls, text: str, pattern: str | PatternFormatter | None = None) -> CalendarDate:
        """Parse a date from text.

        With no pattern the ISO form YYYY-MM-DD is expected. With a
        pattern that also carries time fields, the date part of the
        parsed DateTime is returned.

        Args:
            text: The text to parse.
            pattern: Pattern string or compiled formatter.

        Returns:
            The parsed CalendarDate.

        Raises:
            ParseMismatchError: If the text does not match the pattern,
                or the pattern cannot determine a date.
            InvalidDateValueError: If the named date does not exist.

        Examples:
            >>> CalendarDate.parse("1974-11-14")
            CalendarDate(1974, 11, 14)

            >>> CalendarDate.parse("11/14/1974", "MM/dd/yyyy")
            CalendarDate(1974, 11, 14)
        """
        from chronoform.core.datetime import DateTime
        from chronoform.format import resolve_formatter

        formatter = resolve_formatter(pattern)
        result = formatter.parse(text)
        if isinstance(result, DateTime):
            return result.date()
        if not isinstance(result, CalendarDate):
            raise ParseMismatchError(
                f"pattern {formatter.pattern!r} does not determine a calendar date"
            )
        return result

    @property
    def year(self) -> int:
        """Return the year component (1-9999)."""
        year, _, _ = ordinal_to_ymd(self._ordinal)
        return year

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        _, month, _ = ordinal_to_ymd(self._ordinal)
        return month

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        _, _, day = ordinal_to_ymd(self._ordinal)
        return day

    @property
    def day_of_week(self) -> int:
        """Return the day of the week.

        Returns Monday as 0 through Sunday as 6, matching Python's
        datetime.weekday() convention.

        Examples:
            >>> CalendarDate(1974, 11, 14).day_of_week  # Thursday
            3
        """
        return ordinal_to_day_of_week(self._ordinal)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366).

        Examples:
            >>> CalendarDate(2024, 12, 31).day_of_year  # Leap year
            366
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        return days_before_month(year, month) + day

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self.year)

    def supported_fields(self) -> frozenset[Field]:
        """Return the fields this value can render."""
        return DATE_FIELDS

    def get(self, field: Field) -> int:
        """Return the value of a date field.

        Args:
            field: The field to read.

        Returns:
            The field value; see Field.value_range for the units.

        Raises:
            UnsupportedFieldError: If field is a time-of-day field.

        Examples:
            >>> CalendarDate(1974, 11, 14).get(Field.MONTH)
            11
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        if field is Field.YEAR:
            return year
        if field is Field.MONTH:
            return month
        if field is Field.DAY_OF_MONTH:
            return day
        if field is Field.DAY_OF_YEAR:
            return days_before_month(year, month) + day
        if field is Field.DAY_OF_WEEK:
            return ordinal_to_day_of_week(self._ordinal)
        raise UnsupportedFieldError(
            f"{type(self).__name__} has no {field.value} field"
        )

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> CalendarDate:
        """Return a new CalendarDate with specified components replaced.

        Raises:
            InvalidDateValueError: If the resulting date is invalid.

        Examples:
            >>> CalendarDate(2024, 1, 31).replace(month=6)
            Traceback (most recent call last):
            ...
            InvalidDateValueError: day must be between 1 and 30 for 2024-06, got 31
        """
        y, m, d = ordinal_to_ymd(self._ordinal)
        return CalendarDate(
            year if year is not None else y,
            month if month is not None else m,
            day if day is not None else d,
        )

    def to_ordinal(self) -> int:
        """Return the ordinal day number (1 = 0001-01-01).

        Examples:
            >>> CalendarDate(1, 1, 1).to_ordinal()
            1
        """
        return self._ordinal

    def format(self, pattern: str | PatternFormatter | None = None) -> str:
        """Format the date with a pattern.

        With no pattern the default ISO formatter (yyyy-MM-dd) is used.

        Examples:
            >>> CalendarDate(1974, 11, 14).format()
            '1974-11-14'

            >>> CalendarDate(1974, 11, 14).format("EEEE, MMMM d")
            'Thursday, November 14'
        """
        from chronoform.format import resolve_formatter

        return resolve_formatter(pattern).format(self)

    def __eq__(self, other: object) -> bool:
        """Check equality with another date."""
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal == other._ordinal

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another."""
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal < other._ordinal

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal <= other._ordinal

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal > other._ordinal

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal >= other._ordinal

    def __hash__(self) -> int:
        return hash(self._ordinal)

    def __repr__(self) -> str:
        """Return a string like 'CalendarDate(1974, 11, 14)'."""
        year, month, day = ordinal_to_ymd(self._ordinal)
        return f"CalendarDate({year}, {month}, {day})"

    def __str__(self) -> str:
        """Return the default ISO 8601 representation."""
        return self.format()


__all__ = ["CalendarDate"]
