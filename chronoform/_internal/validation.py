"""Validation utilities for Chronoform.

This module provides range checks shared by the value types and the
parse resolver. All failures raise InvalidDateValueError.

This module is not part of the public API.
"""

from __future__ import annotations

from chronoform._internal.calendar import days_in_month, days_in_year
from chronoform._internal.constants import MAX_YEAR, MIN_YEAR
from chronoform.errors import InvalidDateValueError


def validate_bounds(name: str, value: int, low: int, high: int) -> None:
    """Validate that a named integer value lies within [low, high].

    Args:
        name: Field name used in the error message.
        value: The value to check.
        low: Inclusive lower bound.
        high: Inclusive upper bound.

    Raises:
        InvalidDateValueError: If value is out of range.

    Examples:
        >>> validate_bounds("hour", 24, 0, 23)
        Traceback (most recent call last):
        ...
        InvalidDateValueError: hour must be between 0 and 23, got 24
    """
    if value < low or value > high:
        raise InvalidDateValueError(f"{name} must be between {low} and {high}, got {value}")


def validate_year(year: int) -> None:
    """Validate that a year is within MIN_YEAR to MAX_YEAR."""
    validate_bounds("year", year, MIN_YEAR, MAX_YEAR)


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12."""
    validate_bounds("month", month, 1, 12)


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        InvalidDateValueError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidDateValueError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_day_of_year(year: int, doy: int) -> None:
    """Validate that a day-of-year exists in the given year."""
    max_doy = days_in_year(year)
    if doy < 1 or doy > max_doy:
        raise InvalidDateValueError(
            f"day of year must be between 1 and {max_doy} for {year}, got {doy}"
        )


def require_int(name: str, value: object) -> int:
    """Return value if it is a plain int, else raise TypeError.

    bool is rejected even though it subclasses int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


__all__ = [
    "validate_bounds",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_day_of_year",
    "require_int",
]
