"""Chronoform exception hierarchy.

All Chronoform-specific exceptions inherit from ChronoformError.
"""

from __future__ import annotations


class ChronoformError(Exception):
    """Base exception for all Chronoform errors."""

    pass


class MalformedPatternError(ChronoformError):
    """Pattern string could not be compiled.

    Raised only when compiling a pattern, never while formatting or
    parsing with an already compiled formatter.

    Examples:
        - Unrecognized pattern letter ("yyyy-QQ")
        - Too many repetitions of a letter ("MMMMM")
        - Unterminated quoted literal ("yyyy 'at")
        - Reserved character ("yyyy[-MM]")
    """

    pass


class UnsupportedFieldError(ChronoformError):
    """Value does not carry a field required by the pattern.

    Examples:
        - Formatting a TimeOfDay with a pattern containing "yyyy"
        - Formatting a CalendarDate with a pattern containing "HH"
    """

    pass


class ParseMismatchError(ChronoformError):
    """Text does not match the structure of the pattern.

    Examples:
        - Literal separator differs ("1974-11-14" against "MM/dd/yyyy")
        - Missing or extra digits, trailing characters
        - Unknown month or weekday name
        - Pattern that cannot determine a date or a time ("MM/dd")
    """

    pass


class InvalidDateValueError(ChronoformError):
    """Well-formed input that names a value which does not exist.

    Raised by the value constructors and by parsing once all fields
    have been extracted.

    Examples:
        - Month value outside 1-12
        - February 30th
        - Hour value outside 0-23
        - Weekday that disagrees with the parsed date
    """

    pass


class ConfigurationError(ChronoformError):
    """Invalid formatter configuration.

    Examples:
        - Eleven month names instead of twelve
        - Two-digit year base outside the supported year range
    """

    pass


__all__ = [
    "ChronoformError",
    "MalformedPatternError",
    "UnsupportedFieldError",
    "ParseMismatchError",
    "InvalidDateValueError",
    "ConfigurationError",
]
