"""Pattern compilation.

Turns a pattern string into a tuple of segments.

Pattern Letters:
    y    - year; yy is a two-digit year, other counts pad to the count
    M    - month; M/MM numeric, MMM abbreviated name, MMMM or more full name
    d    - day of month (d, dd)
    D    - day of year (D, DD, DDD)
    E    - day of week; E/EE/EEE abbreviated name, EEEE or more full name
    a    - AM/PM marker
    H    - hour of day, 0-23 (H, HH)
    k    - clock hour of day, 1-24 (k, kk)
    K    - hour of AM/PM, 0-11 (K, KK)
    h    - clock hour of AM/PM, 1-12 (h, hh)
    m    - minute (m, mm)
    s    - second (s, ss)
    S    - fraction of second, 1 to 9 digits
    '..' - quoted literal text; '' is a single quote

Any other ASCII letter is unrecognized. The characters [ ] { } # are
reserved. Everything else is a literal.

This module is not part of the public API.
"""

from __future__ import annotations

import dataclasses

from chronoform.config import FormatterConfig
from chronoform.errors import MalformedPatternError
from chronoform.format.segments import (
    FractionSegment,
    LiteralSegment,
    NumberSegment,
    ReducedYearSegment,
    Segment,
    TextSegment,
)
from chronoform.units.field import Field

RESERVED_CHARACTERS = frozenset("[]{}#")

# Letters whose only forms are one or two digits
_ONE_OR_TWO_DIGITS: dict[str, Field] = {
    "d": Field.DAY_OF_MONTH,
    "H": Field.HOUR_OF_DAY,
    "k": Field.CLOCK_HOUR_OF_DAY,
    "K": Field.HOUR_OF_AMPM,
    "h": Field.CLOCK_HOUR_OF_AMPM,
    "m": Field.MINUTE,
    "s": Field.SECOND,
}

PATTERN_LETTERS = frozenset("yMDEaS") | frozenset(_ONE_OR_TWO_DIGITS)

_MAX_YEAR_WIDTH = 9


def compile_segments(pattern: str, config: FormatterConfig) -> tuple[Segment, ...]:
    """Compile a pattern string into segments.

    Args:
        pattern: The pattern string.
        config: Text tables and options for text and reduced-year fields.

    Returns:
        Tuple of segments in pattern order. Adjacent literal characters
        are merged into a single LiteralSegment.

    Raises:
        MalformedPatternError: On unrecognized letters, reserved
            characters, unterminated quotes or unsupported counts.

    Examples:
        >>> segments = compile_segments("MM/dd", FormatterConfig.default())
        >>> [type(s).__name__ for s in segments]
        ['NumberSegment', 'LiteralSegment', 'NumberSegment']
    """
    segments: list[Segment] = []
    literal: list[str] = []

    def flush_literal() -> None:
        if literal:
            segments.append(LiteralSegment("".join(literal)))
            literal.clear()

    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if _is_ascii_letter(ch):
            count = 1
            while i + count < n and pattern[i + count] == ch:
                count += 1
            flush_literal()
            segments.append(_field_segment(ch, count, config, pattern))
            i += count
        elif ch == "'":
            text, i = _read_quoted(pattern, i)
            literal.append(text)
        elif ch in RESERVED_CHARACTERS:
            raise MalformedPatternError(
                f"reserved character {ch!r} at position {i} in pattern {pattern!r}"
            )
        else:
            literal.append(ch)
            i += 1
    flush_literal()

    return _reserve_adjacent_digits(segments)


def _is_ascii_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def _read_quoted(pattern: str, start: int) -> tuple[str, int]:
    """Read a quoted literal starting at the opening quote.

    Returns:
        The literal text and the position after the closing quote.
    """
    # '' outside a quoted section is a lone quote
    if pattern.startswith("''", start):
        return "'", start + 2

    chars: list[str] = []
    j = start + 1
    while True:
        if j >= len(pattern):
            raise MalformedPatternError(
                f"unterminated quote starting at position {start} in pattern {pattern!r}"
            )
        if pattern[j] == "'":
            if pattern.startswith("''", j):
                chars.append("'")
                j += 2
                continue
            return "".join(chars), j + 1
        chars.append(pattern[j])
        j += 1


def _too_many(letter: str, count: int, pattern: str) -> MalformedPatternError:
    return MalformedPatternError(
        f"unsupported pattern letter count: {letter * count!r} in pattern {pattern!r}"
    )


def _field_segment(letter: str, count: int, config: FormatterConfig, pattern: str) -> Segment:
    """Build the segment for a run of `count` identical letters."""
    if letter == "y":
        if count == 2:
            return ReducedYearSegment(config.two_digit_year_base)
        if count > _MAX_YEAR_WIDTH:
            raise _too_many(letter, count, pattern)
        if count == 1:
            return NumberSegment(Field.YEAR, 1, 4)
        return NumberSegment(Field.YEAR, count, max(count, 4))

    if letter == "M":
        if count <= 2:
            return NumberSegment(Field.MONTH, count, 2)
        if count == 3:
            return _text(Field.MONTH, config.month_abbreviations, config.month_names, 1, config)
        return _text(Field.MONTH, config.month_names, config.month_abbreviations, 1, config)

    if letter == "E":
        if count <= 3:
            return _text(
                Field.DAY_OF_WEEK, config.weekday_abbreviations, config.weekday_names, 0, config
            )
        return _text(
            Field.DAY_OF_WEEK, config.weekday_names, config.weekday_abbreviations, 0, config
        )

    if letter == "a":
        if count == 1:
            return _text(Field.AMPM, config.am_pm_markers, (), 0, config)
        raise _too_many(letter, count, pattern)

    if letter == "D":
        if count <= 3:
            return NumberSegment(Field.DAY_OF_YEAR, count, 3)
        raise _too_many(letter, count, pattern)

    if letter == "S":
        if count <= 9:
            return FractionSegment(count)
        raise _too_many(letter, count, pattern)

    field = _ONE_OR_TWO_DIGITS.get(letter)
    if field is None:
        raise MalformedPatternError(
            f"unrecognized pattern letter {letter!r} in pattern {pattern!r}"
        )
    if count > 2:
        raise _too_many(letter, count, pattern)
    return NumberSegment(field, count, 2)


def _text(
    field: Field,
    names: tuple[str, ...],
    alternates: tuple[str, ...],
    first_value: int,
    config: FormatterConfig,
) -> TextSegment:
    return TextSegment(field, names, alternates, first_value, config.case_sensitive)


def _reserve_adjacent_digits(segments: list[Segment]) -> tuple[Segment, ...]:
    """Let variable-width numbers leave room for fixed-width neighbours.

    A variable-width NumberSegment directly followed by fixed-width
    numeric segments (no literal in between) reserves their total digit
    count, so "Hmm" reads "930" as 9:30.
    """
    result = list(segments)
    for index, segment in enumerate(result):
        if not isinstance(segment, NumberSegment) or segment.fixed_digits is not None:
            continue
        reserved = 0
        for follower in result[index + 1 :]:
            digits = follower.fixed_digits
            if digits is None:
                break
            reserved += digits
        if reserved:
            result[index] = dataclasses.replace(segment, reserved=reserved)
    return tuple(result)


__all__ = ["compile_segments", "PATTERN_LETTERS", "RESERVED_CHARACTERS"]
