"""Field enumeration for the parts of a date/time value.

This module provides the Field enum naming every value component a
pattern can reference, from the year down to the fraction of a second.
"""

from __future__ import annotations

from enum import Enum


class Field(Enum):
    """Semantic kinds of date/time fields.

    Each field knows whether it belongs to the calendar date or to the
    time of day, and the range of values it can take. A value type
    supports a field when it can render it (see ``supported_fields()``
    on CalendarDate, TimeOfDay and DateTime).

    Examples:
        >>> Field.MONTH.is_date_based
        True

        >>> Field.MINUTE.value_range
        (0, 59)

        >>> Field.CLOCK_HOUR_OF_AMPM.value_range
        (1, 12)
    """

    YEAR = "year"
    MONTH = "month"
    DAY_OF_MONTH = "day-of-month"
    DAY_OF_YEAR = "day-of-year"
    DAY_OF_WEEK = "day-of-week"
    AMPM = "am-pm"
    HOUR_OF_DAY = "hour-of-day"
    CLOCK_HOUR_OF_DAY = "clock-hour-of-day"
    HOUR_OF_AMPM = "hour-of-am-pm"
    CLOCK_HOUR_OF_AMPM = "clock-hour-of-am-pm"
    MINUTE = "minute"
    SECOND = "second"
    FRACTION = "fraction-of-second"

    @property
    def is_date_based(self) -> bool:
        """Return True for fields of the calendar date."""
        return self in _DATE_FIELDS

    @property
    def is_time_based(self) -> bool:
        """Return True for fields of the time of day."""
        return not self.is_date_based

    @property
    def value_range(self) -> tuple[int, int]:
        """Return the inclusive (min, max) range of the field.

        The fraction of a second is expressed in nanoseconds; AM/PM is
        0 for AM and 1 for PM; the day of week is 0 (Monday) to 6.

        Examples:
            >>> Field.DAY_OF_MONTH.value_range
            (1, 31)
        """
        return _VALUE_RANGES[self]


_DATE_FIELDS = frozenset(
    {
        Field.YEAR,
        Field.MONTH,
        Field.DAY_OF_MONTH,
        Field.DAY_OF_YEAR,
        Field.DAY_OF_WEEK,
    }
)

_VALUE_RANGES: dict[Field, tuple[int, int]] = {
    Field.YEAR: (1, 9999),
    Field.MONTH: (1, 12),
    Field.DAY_OF_MONTH: (1, 31),
    Field.DAY_OF_YEAR: (1, 366),
    Field.DAY_OF_WEEK: (0, 6),
    Field.AMPM: (0, 1),
    Field.HOUR_OF_DAY: (0, 23),
    Field.CLOCK_HOUR_OF_DAY: (1, 24),
    Field.HOUR_OF_AMPM: (0, 11),
    Field.CLOCK_HOUR_OF_AMPM: (1, 12),
    Field.MINUTE: (0, 59),
    Field.SECOND: (0, 59),
    Field.FRACTION: (0, 999_999_999),
}

DATE_FIELDS: frozenset[Field] = _DATE_FIELDS
TIME_FIELDS: frozenset[Field] = frozenset(f for f in Field if f not in _DATE_FIELDS)


__all__ = ["Field", "DATE_FIELDS", "TIME_FIELDS"]
