"""Tests for the CalendarDate class."""

from __future__ import annotations

import pytest

from chronoform import Field, PatternFormatter
from chronoform.core.date import CalendarDate
from chronoform.errors import (
    InvalidDateValueError,
    ParseMismatchError,
    UnsupportedFieldError,
)


class TestCalendarDateConstruction:
    """Tests for CalendarDate construction and validation."""

    def test_basic_construction(self) -> None:
        """Test basic date construction."""
        d = CalendarDate(1974, 11, 14)
        assert d.year == 1974
        assert d.month == 11
        assert d.day == 14

    def test_construction_leap_year_february(self) -> None:
        """Test construction of Feb 29 in leap year."""
        d = CalendarDate(2024, 2, 29)
        assert (d.year, d.month, d.day) == (2024, 2, 29)

    def test_construction_first_and_last_supported_days(self) -> None:
        """Years 1 and 9999 are both representable."""
        assert CalendarDate(1, 1, 1).to_ordinal() == 1
        assert CalendarDate(9999, 12, 31).year == 9999

    def test_construction_february_30_rejected(self) -> None:
        """February has no 30th day."""
        with pytest.raises(InvalidDateValueError, match="day must be between 1 and 28"):
            CalendarDate(2023, 2, 30)

    def test_construction_feb_29_non_leap_rejected(self) -> None:
        """Feb 29 only exists in leap years."""
        with pytest.raises(InvalidDateValueError):
            CalendarDate(1900, 2, 29)

    def test_construction_invalid_month(self) -> None:
        """Test that month 13 raises InvalidDateValueError."""
        with pytest.raises(InvalidDateValueError, match="month must be between 1 and 12"):
            CalendarDate(2024, 13, 1)

    def test_construction_invalid_year(self) -> None:
        """Year 0 is outside the supported range."""
        with pytest.raises(InvalidDateValueError, match="year must be between 1 and 9999"):
            CalendarDate(0, 1, 1)

    def test_construction_rejects_non_int(self) -> None:
        """Components must be ints."""
        with pytest.raises(TypeError):
            CalendarDate("1974", 11, 14)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            CalendarDate(1974, True, 14)  # type: ignore[arg-type]


class TestCalendarDateProperties:
    """Tests for derived properties."""

    def test_day_of_week(self, november_14: CalendarDate) -> None:
        """November 14, 1974 was a Thursday."""
        assert november_14.day_of_week == 3

    def test_day_of_week_known_dates(self) -> None:
        """Spot-check weekdays against known calendar dates."""
        assert CalendarDate(2024, 1, 15).day_of_week == 0  # Monday
        assert CalendarDate(1955, 11, 5).day_of_week == 5  # Saturday
        assert CalendarDate(1, 1, 1).day_of_week == 0  # Monday

    def test_day_of_year(self, november_14: CalendarDate) -> None:
        """Day of year counts from January 1st."""
        assert november_14.day_of_year == 318
        assert CalendarDate(2024, 12, 31).day_of_year == 366
        assert CalendarDate(2023, 12, 31).day_of_year == 365

    def test_is_leap_year(self) -> None:
        """Leap year rules for centuries."""
        assert CalendarDate(2000, 1, 1).is_leap_year
        assert not CalendarDate(1900, 1, 1).is_leap_year

    def test_ordinal_roundtrip(self) -> None:
        """from_ordinal inverts to_ordinal."""
        for d in (CalendarDate(1, 1, 1), CalendarDate(2000, 2, 29), CalendarDate(9999, 12, 31)):
            assert CalendarDate.from_ordinal(d.to_ordinal()) == d

    def test_known_ordinal(self) -> None:
        """Ordinals match Python's date.toordinal()."""
        assert CalendarDate(2024, 1, 15).to_ordinal() == 738900

    def test_from_ordinal_out_of_range(self) -> None:
        """Ordinal 0 is before year 1."""
        with pytest.raises(InvalidDateValueError):
            CalendarDate.from_ordinal(0)


class TestCalendarDateFields:
    """Tests for the field accessors used by formatters."""

    def test_get_date_fields(self, november_14: CalendarDate) -> None:
        """get() returns each date field."""
        assert november_14.get(Field.YEAR) == 1974
        assert november_14.get(Field.MONTH) == 11
        assert november_14.get(Field.DAY_OF_MONTH) == 14
        assert november_14.get(Field.DAY_OF_YEAR) == 318
        assert november_14.get(Field.DAY_OF_WEEK) == 3

    def test_get_time_field_unsupported(self, november_14: CalendarDate) -> None:
        """A date has no hour."""
        with pytest.raises(UnsupportedFieldError):
            november_14.get(Field.HOUR_OF_DAY)

    def test_supported_fields_are_date_based(self, november_14: CalendarDate) -> None:
        """Only date fields are supported."""
        assert all(f.is_date_based for f in november_14.supported_fields())


class TestCalendarDateReplace:
    """Tests for replace()."""

    def test_replace_month(self) -> None:
        """Replace a single component."""
        assert CalendarDate(2024, 1, 15).replace(month=6) == CalendarDate(2024, 6, 15)

    def test_replace_invalid(self) -> None:
        """Replacing into a non-existent date fails."""
        with pytest.raises(InvalidDateValueError):
            CalendarDate(2024, 1, 31).replace(month=2)


class TestCalendarDateText:
    """Tests for default formatting and parsing."""

    def test_str_is_iso(self, november_14: CalendarDate) -> None:
        """str() uses the default yyyy-MM-dd formatter."""
        assert str(november_14) == "1974-11-14"

    def test_str_pads_small_years(self) -> None:
        """Years below 1000 are zero-padded to four digits."""
        assert str(CalendarDate(44, 3, 15)) == "0044-03-15"

    def test_format_default(self, november_14: CalendarDate) -> None:
        """format() with no pattern matches str()."""
        assert november_14.format() == "1974-11-14"

    def test_format_with_pattern(self, november_14: CalendarDate) -> None:
        """format() accepts a pattern string."""
        assert november_14.format("MM/dd/yyyy") == "11/14/1974"

    def test_format_with_formatter(self, november_14: CalendarDate) -> None:
        """format() accepts a compiled formatter."""
        formatter = PatternFormatter.compile("d MMM yyyy")
        assert november_14.format(formatter) == "14 Nov 1974"

    def test_parse_default(self) -> None:
        """parse() with no pattern expects yyyy-MM-dd."""
        assert CalendarDate.parse("1974-11-14") == CalendarDate(1974, 11, 14)

    def test_parse_with_pattern(self) -> None:
        """parse() accepts a pattern."""
        assert CalendarDate.parse("11/14/1974", "MM/dd/yyyy") == CalendarDate(1974, 11, 14)

    def test_parse_datetime_pattern_keeps_date(self) -> None:
        """A date-time pattern yields the date part."""
        d = CalendarDate.parse("1974-11-14 16:21", "yyyy-MM-dd HH:mm")
        assert d == CalendarDate(1974, 11, 14)

    def test_parse_time_pattern_rejected(self) -> None:
        """A time-only pattern cannot produce a date."""
        with pytest.raises(ParseMismatchError):
            CalendarDate.parse("16:21", "HH:mm")

    def test_parse_default_mismatch(self) -> None:
        """Default parsing rejects other layouts."""
        with pytest.raises(ParseMismatchError):
            CalendarDate.parse("11/14/1974")

    def test_format_rejects_other_types(self, november_14: CalendarDate) -> None:
        """Pattern must be a string, formatter or None."""
        with pytest.raises(TypeError):
            november_14.format(42)  # type: ignore[arg-type]


class TestCalendarDateComparison:
    """Tests for equality, ordering and hashing."""

    def test_equality(self) -> None:
        """Equal dates compare equal and hash alike."""
        assert CalendarDate(1974, 11, 14) == CalendarDate(1974, 11, 14)
        assert hash(CalendarDate(1974, 11, 14)) == hash(CalendarDate(1974, 11, 14))
        assert CalendarDate(1974, 11, 14) != CalendarDate(1974, 11, 15)

    def test_ordering(self) -> None:
        """Dates order chronologically."""
        assert CalendarDate(1974, 11, 14) < CalendarDate(1974, 11, 15)
        assert CalendarDate(1975, 1, 1) > CalendarDate(1974, 12, 31)
        assert CalendarDate(1974, 11, 14) <= CalendarDate(1974, 11, 14)

    def test_not_equal_to_other_types(self) -> None:
        """Dates never equal tuples."""
        assert CalendarDate(1974, 11, 14) != (1974, 11, 14)

    def test_repr(self) -> None:
        """repr shows the constructor call."""
        assert repr(CalendarDate(1974, 11, 14)) == "CalendarDate(1974, 11, 14)"

    def test_immutable(self) -> None:
        """Slots prevent adding attributes."""
        d = CalendarDate(1974, 11, 14)
        with pytest.raises(AttributeError):
            d.year = 2000  # type: ignore[misc]
