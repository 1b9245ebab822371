"""Chronoform: pattern-based date/time formatting and parsing.

Chronoform compiles human-readable patterns such as "MM/dd/yyyy" into
immutable formatters that render dates and times as text and parse text
back into values.

Core Types:
    CalendarDate: Calendar date (year, month, day)
    TimeOfDay: Time of day (hour, minute, second, nanosecond)
    DateTime: One CalendarDate and one TimeOfDay together

Formatting:
    PatternFormatter: Compiled pattern with format() and parse()
    ISO_LOCAL_DATE: Default CalendarDate formatter (yyyy-MM-dd)
    format_temporal / parse_temporal: One-shot helpers with cached compilation

Support:
    Field: Semantic field kinds referenced by patterns
    FormatterConfig: Month/weekday names, AM/PM markers, two-digit year window
    Clock, SystemClock, FixedClock: Injectable source of the current moment

Exceptions:
    ChronoformError: Base exception
    MalformedPatternError: Pattern cannot be compiled
    UnsupportedFieldError: Value lacks a field the pattern needs
    ParseMismatchError: Text does not match the pattern
    InvalidDateValueError: Well-formed input naming a non-existent value
    ConfigurationError: Invalid FormatterConfig

Example:
    >>> from chronoform import CalendarDate, PatternFormatter
    >>> f = PatternFormatter.compile("EEEE, MMMM d, yyyy")
    >>> f.format(CalendarDate(1974, 11, 14))
    'Thursday, November 14, 1974'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from chronoform.core.date import CalendarDate
from chronoform.core.datetime import DateTime
from chronoform.core.time import TimeOfDay

# Support
from chronoform.clock import Clock, FixedClock, SystemClock
from chronoform.config import FormatterConfig
from chronoform.units.field import Field

# Exceptions
from chronoform.errors import (
    ChronoformError,
    ConfigurationError,
    InvalidDateValueError,
    MalformedPatternError,
    ParseMismatchError,
    UnsupportedFieldError,
)

# Formatting
from chronoform.format import (
    ISO_LOCAL_DATE,
    ISO_LOCAL_DATE_TIME,
    ISO_LOCAL_TIME,
    PatternFormatter,
    compile_pattern,
    format_temporal,
    parse_temporal,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "CalendarDate",
    "DateTime",
    "TimeOfDay",
    # Support
    "Clock",
    "FixedClock",
    "SystemClock",
    "FormatterConfig",
    "Field",
    # Exceptions
    "ChronoformError",
    "MalformedPatternError",
    "UnsupportedFieldError",
    "ParseMismatchError",
    "InvalidDateValueError",
    "ConfigurationError",
    # Formatting
    "PatternFormatter",
    "ISO_LOCAL_DATE",
    "ISO_LOCAL_TIME",
    "ISO_LOCAL_DATE_TIME",
    "compile_pattern",
    "format_temporal",
    "parse_temporal",
]
