"""Compiled pattern segments.

A compiled pattern is a tuple of segments. Each segment renders one piece
of output from a value and consumes one piece of input while parsing,
recording the field values it extracts in a ParsedFields instance.

This module is not part of the public API.
"""

from __future__ import annotations

from dataclasses import dataclass

from chronoform._internal.constants import FRACTION_DIGITS
from chronoform.errors import InvalidDateValueError, ParseMismatchError
from chronoform.units.field import Field


class ParsedFields:
    """Field values collected during a single parse.

    A field that occurs more than once in a pattern must parse to the
    same value every time.
    """

    __slots__ = ("text", "values")

    def __init__(self, text: str) -> None:
        self.text = text
        self.values: dict[Field, int] = {}

    def store(self, field: Field, value: int) -> None:
        """Record a field value.

        Raises:
            InvalidDateValueError: If the field was already parsed with a
                different value.
        """
        previous = self.values.get(field)
        if previous is not None and previous != value:
            raise InvalidDateValueError(
                f"conflicting values for {field.value}: {previous} and {value}"
            )
        self.values[field] = value

    def mismatch(self, pos: int, expected: str) -> ParseMismatchError:
        """Build a ParseMismatchError pointing at a position in the text."""
        found = self.text[pos : pos + 10]
        if not found:
            found_desc = "end of text"
        else:
            found_desc = repr(found)
        return ParseMismatchError(
            f"text {self.text!r} does not match at position {pos}: "
            f"expected {expected}, found {found_desc}"
        )


def _count_digits(text: str, pos: int) -> int:
    """Return the length of the ASCII digit run starting at pos."""
    end = pos
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    return end - pos


@dataclass(frozen=True)
class Segment:
    """Base class for compiled pattern segments."""

    @property
    def field(self) -> Field | None:
        """The field this segment reads and writes, or None for literals."""
        return None

    @property
    def fixed_digits(self) -> int | None:
        """Digit count for fixed-width numeric segments, else None."""
        return None

    def render(self, value) -> str:
        raise NotImplementedError

    def parse(self, parsed: ParsedFields, pos: int) -> int:
        """Consume input at pos and return the position after it."""
        raise NotImplementedError


@dataclass(frozen=True)
class LiteralSegment(Segment):
    """Text emitted and matched verbatim."""

    text: str

    def render(self, value) -> str:
        return self.text

    def parse(self, parsed: ParsedFields, pos: int) -> int:
        if not parsed.text.startswith(self.text, pos):
            raise parsed.mismatch(pos, repr(self.text))
        return pos + len(self.text)


@dataclass(frozen=True)
class NumberSegment(Segment):
    """A numeric field rendered in decimal.

    Output is zero-padded to min_width. Input takes between min_width and
    max_width digits; when the widths differ the field is variable width
    and leaves `reserved` digits for the fixed-width numeric fields that
    directly follow it.
    """

    kind: Field
    min_width: int
    max_width: int
    reserved: int = 0

    @property
    def field(self) -> Field:
        return self.kind

    @property
    def fixed_digits(self) -> int | None:
        if self.min_width == self.max_width:
            return self.min_width
        return None

    def render(self, value) -> str:
        return str(value.get(self.kind)).zfill(self.min_width)

    def parse(self, parsed: ParsedFields, pos: int) -> int:
        available = _count_digits(parsed.text, pos) - self.reserved
        width = min(self.max_width, available)
        if width < self.min_width:
            if self.min_width == self.max_width:
                expected = f"{self.min_width} digits for {self.kind.value}"
            else:
                expected = f"{self.min_width} to {self.max_width} digits for {self.kind.value}"
            raise parsed.mismatch(pos, expected)
        parsed.store(self.kind, int(parsed.text[pos : pos + width]))
        return pos + width


@dataclass(frozen=True)
class ReducedYearSegment(Segment):
    """Two-digit year resolved into the window [base, base + 99].

    Examples:
        With base 2000, "74" parses to 2074; with base 1950 it parses
        to 1974. Either way 1974 renders as "74".
    """

    base: int

    @property
    def field(self) -> Field:
        return Field.YEAR

    @property
    def fixed_digits(self) -> int:
        return 2

    def render(self, value) -> str:
        return f"{value.get(Field.YEAR) % 100:02d}"

    def parse(self, parsed: ParsedFields, pos: int) -> int:
        if _count_digits(parsed.text, pos) < 2:
            raise parsed.mismatch(pos, "2 digits for year")
        two_digits = int(parsed.text[pos : pos + 2])
        year = self.base - self.base % 100 + two_digits
        if year < self.base:
            year += 100
        parsed.store(Field.YEAR, year)
        return pos + 2


@dataclass(frozen=True)
class FractionSegment(Segment):
    """Fraction of a second with exactly `width` digits.

    Output truncates the nanosecond value to `width` digits; input is
    right-padded with zeros back to nanoseconds.
    """

    width: int

    @property
    def field(self) -> Field:
        return Field.FRACTION

    @property
    def fixed_digits(self) -> int:
        return self.width

    def render(self, value) -> str:
        return f"{value.get(Field.FRACTION):0{FRACTION_DIGITS}d}"[: self.width]

    def parse(self, parsed: ParsedFields, pos: int) -> int:
        if _count_digits(parsed.text, pos) < self.width:
            raise parsed.mismatch(pos, f"{self.width} digits for fraction of second")
        digits = parsed.text[pos : pos + self.width]
        parsed.store(Field.FRACTION, int(digits.ljust(FRACTION_DIGITS, "0")))
        return pos + self.width


@dataclass(frozen=True)
class TextSegment(Segment):
    """A field rendered as a name, such as a month or weekday.

    `names` are used for output. Input accepts `names` and `alternates`
    (the other name length) and always takes the longest candidate that
    matches at the current position, so "June" wins over "Jun".
    """

    kind: Field
    names: tuple[str, ...]
    alternates: tuple[str, ...]
    first_value: int
    case_sensitive: bool = True

    @property
    def field(self) -> Field:
        return self.kind

    def render(self, value) -> str:
        return self.names[value.get(self.kind) - self.first_value]

    def parse(self, parsed: ParsedFields, pos: int) -> int:
        best_index = -1
        best_length = 0
        for table in (self.names, self.alternates):
            for index, name in enumerate(table):
                if len(name) > best_length and self._matches(parsed.text, pos, name):
                    best_index = index
                    best_length = len(name)
        if best_index < 0:
            raise parsed.mismatch(pos, f"a {self.kind.value} name")
        parsed.store(self.kind, best_index + self.first_value)
        return pos + best_length

    def _matches(self, text: str, pos: int, name: str) -> bool:
        candidate = text[pos : pos + len(name)]
        if self.case_sensitive:
            return candidate == name
        return candidate.lower() == name.lower()


__all__ = [
    "ParsedFields",
    "Segment",
    "LiteralSegment",
    "NumberSegment",
    "ReducedYearSegment",
    "FractionSegment",
    "TextSegment",
]
