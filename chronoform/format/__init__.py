"""Pattern-based formatting and parsing.

This module provides the PatternFormatter and convenience functions that
compile patterns on demand. Compiled patterns are kept in a bounded LRU
cache, so repeated calls with the same pattern string reuse one formatter
while rarely used patterns are eventually dropped.

Functions:
    compile_pattern: Compile (or fetch the cached) formatter for a pattern.
    format_temporal: Format a value with a pattern.
    parse_temporal: Parse text with a pattern.
    resolve_formatter: Turn a pattern string, formatter or None into a formatter.

Examples:
    >>> from chronoform import CalendarDate
    >>> from chronoform.format import format_temporal, parse_temporal

    >>> format_temporal(CalendarDate(1974, 11, 14), "EEE, MMM d yyyy")
    'Thu, Nov 14 1974'

    >>> parse_temporal("11/14/1974", "MM/dd/yyyy")
    CalendarDate(1974, 11, 14)
"""

from __future__ import annotations

import functools

from chronoform.config import FormatterConfig
from chronoform.format.formatter import (
    ISO_LOCAL_DATE,
    ISO_LOCAL_DATE_TIME,
    ISO_LOCAL_TIME,
    PatternFormatter,
    TemporalType,
)

PATTERN_CACHE_SIZE = 256


@functools.lru_cache(maxsize=PATTERN_CACHE_SIZE)
def compile_pattern(pattern: str, config: FormatterConfig | None = None) -> PatternFormatter:
    """Compile a pattern, reusing an earlier result for the same arguments.

    At most PATTERN_CACHE_SIZE formatters are kept; the least recently
    used one is evicted first. Failed compilations are not cached.

    Raises:
        MalformedPatternError: If the pattern cannot be compiled.
    """
    return PatternFormatter.compile(pattern, config)


def resolve_formatter(pattern: str | PatternFormatter | None) -> PatternFormatter:
    """Return a formatter for a pattern string, a formatter, or None.

    None selects ISO_LOCAL_DATE, the default CalendarDate formatter.

    Raises:
        MalformedPatternError: If a pattern string cannot be compiled.
        TypeError: If pattern is of any other type.
    """
    if pattern is None:
        return ISO_LOCAL_DATE
    if isinstance(pattern, PatternFormatter):
        return pattern
    if isinstance(pattern, str):
        return compile_pattern(pattern)
    raise TypeError(
        f"pattern must be a str or PatternFormatter, got {type(pattern).__name__}"
    )


def format_temporal(
    value: TemporalType,
    pattern: str,
    config: FormatterConfig | None = None,
) -> str:
    """Format a CalendarDate, TimeOfDay or DateTime with a pattern string.

    Raises:
        MalformedPatternError: If the pattern cannot be compiled.
        UnsupportedFieldError: If the value lacks a field the pattern needs.
    """
    return compile_pattern(pattern, config).format(value)


def parse_temporal(
    text: str,
    pattern: str,
    config: FormatterConfig | None = None,
) -> TemporalType:
    """Parse text with a pattern string.

    Raises:
        MalformedPatternError: If the pattern cannot be compiled.
        ParseMismatchError: If the text does not match the pattern.
        InvalidDateValueError: If the text names a value that does not exist.
    """
    return compile_pattern(pattern, config).parse(text)


__all__: list[str] = [
    "PatternFormatter",
    "TemporalType",
    "ISO_LOCAL_DATE",
    "ISO_LOCAL_TIME",
    "ISO_LOCAL_DATE_TIME",
    "PATTERN_CACHE_SIZE",
    "compile_pattern",
    "resolve_formatter",
    "format_temporal",
    "parse_temporal",
]
