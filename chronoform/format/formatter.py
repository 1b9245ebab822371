"""PatternFormatter: a compiled, reusable date/time pattern.

A PatternFormatter is created once from a pattern string and then used
to format values to text and parse text back into values. It holds no
reference to any value and is never mutated, so one instance can be
shared freely.

Examples:
    >>> from chronoform import CalendarDate
    >>> f = PatternFormatter.compile("MM/dd/yyyy")
    >>> f.format(CalendarDate(1974, 11, 14))
    '11/14/1974'

    >>> f.parse("11/14/1974")
    CalendarDate(1974, 11, 14)
"""

from __future__ import annotations

import logging
from typing import Union

from chronoform.config import FormatterConfig
from chronoform.core.date import CalendarDate
from chronoform.core.datetime import DateTime
from chronoform.core.time import TimeOfDay
from chronoform.errors import ParseMismatchError, UnsupportedFieldError
from chronoform.format.pattern import compile_segments
from chronoform.format.resolve import parse_target, resolve
from chronoform.format.segments import ParsedFields, Segment
from chronoform.units.field import Field

logger = logging.getLogger(__name__)

# Type alias for values a formatter reads and produces
TemporalType = Union[CalendarDate, TimeOfDay, DateTime]


class PatternFormatter:
    """An immutable compiled date/time pattern.

    Use PatternFormatter.compile() to create one. The formatter records,
    for each field in the pattern, its semantic kind, whether it renders
    as a number or as text, and its width.

    Attributes:
        pattern: The pattern string the formatter was compiled from.
        config: The FormatterConfig used for text fields and two-digit years.
        fields: The set of fields the pattern references.
    """

    __slots__ = ("_pattern", "_config", "_segments", "_fields", "_target", "_unparseable")

    def __init__(
        self,
        pattern: str,
        segments: tuple[Segment, ...],
        config: FormatterConfig,
    ) -> None:
        """Create a formatter from already compiled segments.

        Most callers want PatternFormatter.compile() instead.
        """
        self._pattern = pattern
        self._config = config
        self._segments = segments
        self._fields: frozenset[Field] = frozenset(
            s.field for s in segments if s.field is not None
        )
        self._target, self._unparseable = parse_target(self._fields)

    @classmethod
    def compile(cls, pattern: str, config: FormatterConfig | None = None) -> PatternFormatter:
        """Compile a pattern string into a formatter.

        Args:
            pattern: Pattern of field letters and literals, e.g. "MM/dd/yyyy".
            config: Text tables and options. Defaults to
                FormatterConfig.default().

        Returns:
            A new PatternFormatter.

        Raises:
            MalformedPatternError: If the pattern cannot be compiled.
            TypeError: If pattern is not a string.

        Examples:
            >>> PatternFormatter.compile("HH:mm")
            PatternFormatter('HH:mm')

            >>> PatternFormatter.compile("yyyy-QQ")
            Traceback (most recent call last):
            ...
            MalformedPatternError: unrecognized pattern letter 'Q' in pattern 'yyyy-QQ'
        """
        if not isinstance(pattern, str):
            raise TypeError(f"pattern must be a str, got {type(pattern).__name__}")
        if config is None:
            config = FormatterConfig.default()
        elif not isinstance(config, FormatterConfig):
            raise TypeError(f"config must be a FormatterConfig, got {type(config).__name__}")

        segments = compile_segments(pattern, config)
        formatter = cls(pattern, segments, config)
        logger.debug(
            "compiled pattern %r into %d segments (parses to %s)",
            pattern,
            len(segments),
            formatter._target.__name__ if formatter._target else "nothing",
        )
        return formatter

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def config(self) -> FormatterConfig:
        return self._config

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    @property
    def fields(self) -> frozenset[Field]:
        return self._fields

    @property
    def parse_type(self) -> type | None:
        """The value type parse() returns, or None if the pattern cannot be parsed."""
        return self._target

    def format(self, value: TemporalType) -> str:
        """Render a value as text.

        Args:
            value: A CalendarDate, TimeOfDay or DateTime whose fields cover
                every field in the pattern.

        Returns:
            The pattern's literals interleaved with the rendered fields.

        Raises:
            UnsupportedFieldError: If the pattern references a field the
                value does not have.
            TypeError: If value is not a supported type.

        Examples:
            >>> from chronoform import DateTime
            >>> PatternFormatter.compile("MM/dd/yyyy").format(DateTime(1955, 11, 5, 13))
            '11/05/1955'
        """
        if not isinstance(value, (CalendarDate, TimeOfDay, DateTime)):
            raise TypeError(
                f"expected CalendarDate, TimeOfDay or DateTime, got {type(value).__name__}"
            )
        missing = self._fields - value.supported_fields()
        if missing:
            names = ", ".join(sorted(f.value for f in missing))
            raise UnsupportedFieldError(
                f"pattern {self._pattern!r} requires {names}, "
                f"which {type(value).__name__} does not have"
            )
        return "".join(segment.render(value) for segment in self._segments)

    def parse(self, text: str) -> TemporalType:
        """Parse text into a value.

        The result type follows the pattern's fields: date fields only
        give a CalendarDate, time fields only give a TimeOfDay, both give
        a DateTime. Parsing is all-or-nothing.

        Args:
            text: The text to parse.

        Returns:
            The parsed value.

        Raises:
            ParseMismatchError: If the text does not match the pattern's
                structure, or the pattern cannot determine a value.
            InvalidDateValueError: If the text names a value that does
                not exist, such as February 30th.
            TypeError: If text is not a string.

        Examples:
            >>> PatternFormatter.compile("HH:mm").parse("16:21")
            TimeOfDay(16, 21, 0, 0)
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be a str, got {type(text).__name__}")
        if self._target is None:
            raise ParseMismatchError(f"cannot parse with pattern {self._pattern!r}: {self._unparseable}")

        parsed = ParsedFields(text)
        pos = 0
        for segment in self._segments:
            pos = segment.parse(parsed, pos)
        if pos != len(text):
            raise ParseMismatchError(
                f"text {text!r} has unparsed trailing characters at position {pos}: {text[pos:]!r}"
            )
        return resolve(parsed.values, self._target)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PatternFormatter):
            return NotImplemented
        return self._pattern == other._pattern and self._config == other._config

    def __hash__(self) -> int:
        return hash((self._pattern, self._config))

    def __repr__(self) -> str:
        if self._config == FormatterConfig.default():
            return f"PatternFormatter({self._pattern!r})"
        return f"PatternFormatter({self._pattern!r}, config={self._config!r})"


ISO_LOCAL_DATE = PatternFormatter.compile("yyyy-MM-dd")
"""Default CalendarDate formatter: 4-digit year, 2-digit month and day."""

ISO_LOCAL_TIME = PatternFormatter.compile("HH:mm:ss")

ISO_LOCAL_DATE_TIME = PatternFormatter.compile("yyyy-MM-dd'T'HH:mm:ss")


__all__ = [
    "PatternFormatter",
    "TemporalType",
    "ISO_LOCAL_DATE",
    "ISO_LOCAL_TIME",
    "ISO_LOCAL_DATE_TIME",
]
