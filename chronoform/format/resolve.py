"""Resolution of parsed fields into values.

After a parse has walked every segment, the extracted field values are
combined here into a CalendarDate, TimeOfDay or DateTime. Range checks
and cross-checks between related fields happen at this stage.

This module is not part of the public API.
"""

from __future__ import annotations

from chronoform._internal.calendar import ymd_to_ordinal
from chronoform._internal.validation import (
    validate_bounds,
    validate_day_of_year,
    validate_year,
)
from chronoform.core.date import CalendarDate
from chronoform.core.datetime import DateTime
from chronoform.core.time import TimeOfDay
from chronoform.errors import InvalidDateValueError
from chronoform.units.field import Field

_HALF_DAY_HOURS = (
    Field.HOUR_OF_AMPM,
    Field.CLOCK_HOUR_OF_AMPM,
)


def determines_date(fields: frozenset[Field]) -> bool:
    """Return True if these fields are enough to name a calendar date.

    A date needs a year plus either month and day of month, or a day
    of year.
    """
    if Field.YEAR not in fields:
        return False
    return Field.DAY_OF_YEAR in fields or {Field.MONTH, Field.DAY_OF_MONTH} <= fields


def determines_time(fields: frozenset[Field]) -> bool:
    """Return True if these fields are enough to name a time of day.

    A time needs a 24-hour field, or a 12-hour field with an AM/PM
    marker. Minutes, seconds and fractions default to zero.
    """
    if Field.HOUR_OF_DAY in fields or Field.CLOCK_HOUR_OF_DAY in fields:
        return True
    return Field.AMPM in fields and any(f in fields for f in _HALF_DAY_HOURS)


def parse_target(fields: frozenset[Field]) -> tuple[type | None, str]:
    """Decide which value type a pattern with these fields parses to.

    Returns:
        (CalendarDate, TimeOfDay or DateTime, "") when the pattern can be
        parsed, else (None, reason).

    Examples:
        >>> parse_target(frozenset({Field.YEAR, Field.MONTH, Field.DAY_OF_MONTH}))
        (<class 'chronoform.core.date.CalendarDate'>, '')
    """
    has_date = any(f.is_date_based for f in fields)
    has_time = any(f.is_time_based for f in fields)

    if not has_date and not has_time:
        return None, "pattern has no fields"
    if has_date and not determines_date(fields):
        return None, "pattern does not determine a calendar date (needs y with M and d, or y with D)"
    if has_time and not determines_time(fields):
        return None, "pattern does not determine a time of day (needs H, k, or h/K with a)"
    if has_date and has_time:
        return DateTime, ""
    if has_date:
        return CalendarDate, ""
    return TimeOfDay, ""


def resolve(values: dict[Field, int], target: type) -> CalendarDate | TimeOfDay | DateTime:
    """Build the target value from parsed field values.

    Args:
        values: Field values collected by the segments.
        target: CalendarDate, TimeOfDay or DateTime, as chosen by
            parse_target for the same pattern.

    Returns:
        The resolved value.

    Raises:
        InvalidDateValueError: If a field is out of range, the date does
            not exist, or two related fields disagree.
    """
    for field, value in values.items():
        low, high = field.value_range
        validate_bounds(field.value, value, low, high)

    if target is CalendarDate:
        return _resolve_date(values)
    if target is TimeOfDay:
        return _resolve_time(values)
    return DateTime.combine(_resolve_date(values), _resolve_time(values))


def _resolve_date(values: dict[Field, int]) -> CalendarDate:
    year = values[Field.YEAR]
    month = values.get(Field.MONTH)
    day = values.get(Field.DAY_OF_MONTH)
    day_of_year = values.get(Field.DAY_OF_YEAR)

    if month is not None and day is not None:
        date = CalendarDate(year, month, day)
        if day_of_year is not None and day_of_year != date.day_of_year:
            raise InvalidDateValueError(
                f"day of year {day_of_year} conflicts with {date}, which is day {date.day_of_year}"
            )
    else:
        validate_year(year)
        validate_day_of_year(year, day_of_year)
        date = CalendarDate.from_ordinal(ymd_to_ordinal(year, 1, 1) + day_of_year - 1)
        if month is not None and month != date.month:
            raise InvalidDateValueError(
                f"month {month} conflicts with day of year {day_of_year} of {year}"
            )
        if day is not None and day != date.day:
            raise InvalidDateValueError(
                f"day of month {day} conflicts with day of year {day_of_year} of {year}"
            )

    weekday = values.get(Field.DAY_OF_WEEK)
    if weekday is not None and weekday != date.day_of_week:
        raise InvalidDateValueError(
            f"{date} falls on day of week {date.day_of_week}, not {weekday}"
        )
    return date


def _resolve_time(values: dict[Field, int]) -> TimeOfDay:
    ampm = values.get(Field.AMPM)
    candidates: list[tuple[Field, int]] = []

    if Field.HOUR_OF_DAY in values:
        candidates.append((Field.HOUR_OF_DAY, values[Field.HOUR_OF_DAY]))
    if Field.CLOCK_HOUR_OF_DAY in values:
        candidates.append((Field.CLOCK_HOUR_OF_DAY, values[Field.CLOCK_HOUR_OF_DAY] % 24))
    if ampm is not None:
        if Field.HOUR_OF_AMPM in values:
            candidates.append((Field.HOUR_OF_AMPM, values[Field.HOUR_OF_AMPM] + 12 * ampm))
        if Field.CLOCK_HOUR_OF_AMPM in values:
            candidates.append(
                (Field.CLOCK_HOUR_OF_AMPM, values[Field.CLOCK_HOUR_OF_AMPM] % 12 + 12 * ampm)
            )

    source, hour = candidates[0]
    for other, other_hour in candidates[1:]:
        if other_hour != hour:
            raise InvalidDateValueError(
                f"{other.value} gives hour {other_hour}, but {source.value} gives hour {hour}"
            )
    if ampm is not None and (hour >= 12) != (ampm == 1):
        raise InvalidDateValueError(f"hour {hour} conflicts with the parsed AM/PM marker")

    # Without a marker a 12-hour field only fixes the hour modulo 12
    if ampm is None:
        for field in _HALF_DAY_HOURS:
            if field in values and values[field] % 12 != hour % 12:
                raise InvalidDateValueError(
                    f"{field.value} {values[field]} conflicts with {source.value} {hour}"
                )

    return TimeOfDay(
        hour,
        values.get(Field.MINUTE, 0),
        values.get(Field.SECOND, 0),
        values.get(Field.FRACTION, 0),
    )


__all__ = ["determines_date", "determines_time", "parse_target", "resolve"]
