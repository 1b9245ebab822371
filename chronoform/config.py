"""Formatter configuration.

FormatterConfig holds everything a compiled pattern needs beyond the
pattern string itself: the text used for month and weekday names and
AM/PM markers, the window for two-digit years, and whether text fields
match case-sensitively when parsing.
"""

from __future__ import annotations

from dataclasses import dataclass

from chronoform._internal.constants import (
    AM_PM_MARKERS,
    DEFAULT_TWO_DIGIT_YEAR_BASE,
    MAX_YEAR,
    MIN_YEAR,
    MONTH_ABBREVIATIONS,
    MONTH_NAMES,
    WEEKDAY_ABBREVIATIONS,
    WEEKDAY_NAMES,
)
from chronoform.errors import ConfigurationError


@dataclass(frozen=True)
class FormatterConfig:
    """Text symbols and parsing options for a PatternFormatter.

    Instances are immutable and hashable, so equal configurations share
    cached compiled formatters.

    Attributes:
        month_names: Twelve full month names, January first.
        month_abbreviations: Twelve abbreviated month names.
        weekday_names: Seven full weekday names, Monday first.
        weekday_abbreviations: Seven abbreviated weekday names.
        am_pm_markers: Markers for the first and second half of the day.
        two_digit_year_base: First year of the 100-year window that
            two-digit years ("yy") are resolved into.
        case_sensitive: Whether text fields must match case exactly
            when parsing.

    Examples:
        >>> FormatterConfig.default().month_abbreviations[10]
        'Nov'

        >>> FormatterConfig(two_digit_year_base=1950).two_digit_year_base
        1950
    """

    month_names: tuple[str, ...] = MONTH_NAMES
    month_abbreviations: tuple[str, ...] = MONTH_ABBREVIATIONS
    weekday_names: tuple[str, ...] = WEEKDAY_NAMES
    weekday_abbreviations: tuple[str, ...] = WEEKDAY_ABBREVIATIONS
    am_pm_markers: tuple[str, ...] = AM_PM_MARKERS
    two_digit_year_base: int = DEFAULT_TWO_DIGIT_YEAR_BASE
    case_sensitive: bool = True

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples so the config stays hashable
        for name in (
            "month_names",
            "month_abbreviations",
            "weekday_names",
            "weekday_abbreviations",
            "am_pm_markers",
        ):
            object.__setattr__(self, name, tuple(getattr(self, name)))

        _check_table("month_names", self.month_names, 12, self.case_sensitive)
        _check_table("month_abbreviations", self.month_abbreviations, 12, self.case_sensitive)
        _check_table("weekday_names", self.weekday_names, 7, self.case_sensitive)
        _check_table("weekday_abbreviations", self.weekday_abbreviations, 7, self.case_sensitive)
        _check_table("am_pm_markers", self.am_pm_markers, 2, self.case_sensitive)

        base = self.two_digit_year_base
        if isinstance(base, bool) or not isinstance(base, int):
            raise ConfigurationError(
                f"two_digit_year_base must be an int, got {type(base).__name__}"
            )
        if base < MIN_YEAR or base > MAX_YEAR - 99:
            raise ConfigurationError(
                f"two_digit_year_base must be between {MIN_YEAR} and {MAX_YEAR - 99}, got {base}"
            )

    @classmethod
    def default(cls) -> FormatterConfig:
        """Return the English configuration used when none is given."""
        return _DEFAULT


def _check_table(name: str, values: tuple[str, ...], size: int, case_sensitive: bool) -> None:
    """Validate one text symbol table.

    Raises:
        ConfigurationError: On wrong size, blank entries or duplicates.
    """
    if len(values) != size:
        raise ConfigurationError(f"{name} must have {size} entries, got {len(values)}")
    for value in values:
        if not isinstance(value, str) or not value.strip():
            raise ConfigurationError(f"{name} entries must be non-blank strings, got {value!r}")
    keys = [v if case_sensitive else v.casefold() for v in values]
    if len(set(keys)) != size:
        raise ConfigurationError(f"{name} entries must be distinct, got {values!r}")


_DEFAULT = FormatterConfig()


__all__ = ["FormatterConfig"]
