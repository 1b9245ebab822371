"""Tests for PatternFormatter.parse()."""

from __future__ import annotations

import pytest

from chronoform import (
    CalendarDate,
    DateTime,
    FormatterConfig,
    PatternFormatter,
    TimeOfDay,
    parse_temporal,
)
from chronoform.errors import InvalidDateValueError, ParseMismatchError


def parse(pattern: str, text: str, config: FormatterConfig | None = None) -> object:
    return PatternFormatter.compile(pattern, config).parse(text)


class TestParseDates:
    """Tests for parsing calendar dates."""

    def test_numeric(self) -> None:
        """MM/dd/yyyy yields a CalendarDate."""
        assert parse("MM/dd/yyyy", "11/14/1974") == CalendarDate(1974, 11, 14)

    def test_names(self) -> None:
        """Full weekday and month names."""
        result = parse("EEEE, MMMM d, yyyy", "Thursday, November 14, 1974")
        assert result == CalendarDate(1974, 11, 14)

    def test_single_letters_accept_one_or_two_digits(self) -> None:
        """d and M take one or two digits."""
        assert parse("d/M/yyyy", "5/1/2024") == CalendarDate(2024, 1, 5)
        assert parse("d/M/yyyy", "05/12/2024") == CalendarDate(2024, 12, 5)

    def test_short_year(self) -> None:
        """y accepts fewer than four digits."""
        assert parse("y-M-d", "44-3-15") == CalendarDate(44, 3, 15)

    def test_compact(self) -> None:
        """Fixed-width fields need no separators."""
        assert parse("yyyyMMdd", "19741114") == CalendarDate(1974, 11, 14)

    def test_variable_width_year_before_fixed_fields(self) -> None:
        """y leaves room for the fixed-width fields after it."""
        assert parse("yMMdd", "19741114") == CalendarDate(1974, 11, 14)
        assert parse("yMMdd", "441114") == CalendarDate(44, 11, 14)


class TestParseTimes:
    """Tests for parsing times of day."""

    def test_24_hour(self) -> None:
        """HH:mm yields a TimeOfDay."""
        assert parse("HH:mm", "16:21") == TimeOfDay(16, 21, 0, 0)

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("12:05 AM", TimeOfDay(0, 5)),
            ("9:00 AM", TimeOfDay(9, 0)),
            ("12:05 PM", TimeOfDay(12, 5)),
            ("4:21 PM", TimeOfDay(16, 21)),
        ],
    )
    def test_12_hour(self, text: str, expected: TimeOfDay) -> None:
        """h with a marker resolves to a 24-hour time."""
        assert parse("h:mm a", text) == expected

    def test_hour_of_ampm(self) -> None:
        """K is 0-11 within the half day."""
        assert parse("K a", "0 PM") == TimeOfDay(12)
        assert parse("K a", "11 AM") == TimeOfDay(11)

    def test_clock_hour_of_day(self) -> None:
        """k 24 is midnight."""
        assert parse("kk:mm", "24:30") == TimeOfDay(0, 30)
        assert parse("kk:mm", "13:30") == TimeOfDay(13, 30)

    @pytest.mark.parametrize(("text", "expected"), [("930", TimeOfDay(9, 30)), ("1630", TimeOfDay(16, 30))])
    def test_adjacent_numbers(self, text: str, expected: TimeOfDay) -> None:
        """H followed by mm splits the digits from the right."""
        assert parse("Hmm", text) == expected

    def test_fraction(self) -> None:
        """S digits are scaled to nanoseconds."""
        assert parse("HH:mm:ss.SSS", "14:30:45.123") == TimeOfDay(14, 30, 45, 123_000_000)
        assert parse("HH:mm:ss.S", "14:30:45.5").nanosecond == 500_000_000

    def test_missing_minutes_default_to_zero(self) -> None:
        """Only the hour is required."""
        assert parse("HH", "07") == TimeOfDay(7)


class TestParseDateTimes:
    """Tests for parsing combined date-times."""

    def test_date_and_time(self) -> None:
        """Date and time fields together yield a DateTime."""
        result = parse("yyyy-MM-dd HH:mm:ss", "1955-11-05 13:00:00")
        assert result == DateTime(1955, 11, 5, 13, 0, 0)
        assert isinstance(result, DateTime)

    def test_iso_local_date_time(self) -> None:
        """Quoted T separator."""
        result = parse("yyyy-MM-dd'T'HH:mm:ss", "1974-11-14T16:21:00")
        assert result == DateTime(1974, 11, 14, 16, 21)


class TestTwoDigitYears:
    """Tests for reduced years."""

    def test_default_base(self) -> None:
        """The default window is 2000-2099."""
        assert parse("dd.MM.yy", "14.11.74") == CalendarDate(2074, 11, 14)

    def test_custom_base(self) -> None:
        """A base of 1950 gives the window 1950-2049."""
        config = FormatterConfig(two_digit_year_base=1950)
        assert parse("dd.MM.yy", "14.11.74", config) == CalendarDate(1974, 11, 14)
        assert parse("dd.MM.yy", "14.11.20", config) == CalendarDate(2020, 11, 14)
        assert parse("dd.MM.yy", "14.11.50", config) == CalendarDate(1950, 11, 14)

    def test_needs_exactly_two_digits(self) -> None:
        """A single digit does not match yy."""
        with pytest.raises(ParseMismatchError):
            parse("yy-MM-dd", "7-11-14")


class TestDayOfYear:
    """Tests for D."""

    def test_resolves_date(self) -> None:
        """Year and day of year name a date."""
        assert parse("yyyy-DDD", "1974-318") == CalendarDate(1974, 11, 14)
        assert parse("yyyy-D", "2024-60") == CalendarDate(2024, 2, 29)

    def test_day_366_in_common_year(self) -> None:
        """A common year has 365 days."""
        with pytest.raises(InvalidDateValueError, match="day of year"):
            parse("yyyy-DDD", "2023-366")

    def test_consistent_with_month_and_day(self) -> None:
        """D may repeat information given by M and d."""
        assert parse("yyyy-MM-dd DDD", "1974-11-14 318") == CalendarDate(1974, 11, 14)

    def test_conflict_with_month_and_day(self) -> None:
        """D must agree with M and d."""
        with pytest.raises(InvalidDateValueError, match="conflicts"):
            parse("yyyy-MM-dd DDD", "1974-11-14 317")

    def test_conflict_with_month(self) -> None:
        """D must agree with M when d is absent."""
        with pytest.raises(InvalidDateValueError, match="conflicts"):
            parse("yyyy-DDD MM", "1974-318 12")


class TestTextFields:
    """Tests for name matching."""

    def test_abbreviated_month(self) -> None:
        """MMM reads abbreviations."""
        assert parse("d MMM yyyy", "14 Nov 1974") == CalendarDate(1974, 11, 14)

    def test_lenient_name_length(self) -> None:
        """MMM also reads full names, and MMMM abbreviations."""
        assert parse("d MMM yyyy", "14 November 1974") == CalendarDate(1974, 11, 14)
        assert parse("d MMMM yyyy", "14 Nov 1974") == CalendarDate(1974, 11, 14)

    def test_longest_match_wins(self) -> None:
        """June is preferred over Jun."""
        assert parse("d MMMM yyyy", "1 June 2024") == CalendarDate(2024, 6, 1)

    def test_case_sensitive_by_default(self) -> None:
        """The default config requires exact case."""
        with pytest.raises(ParseMismatchError, match="month name"):
            parse("d MMM yyyy", "14 nov 1974")

    def test_case_insensitive_config(self) -> None:
        """case_sensitive=False ignores case."""
        config = FormatterConfig(case_sensitive=False)
        assert parse("d MMM yyyy", "14 NOV 1974", config) == CalendarDate(1974, 11, 14)
        assert parse("h a", "4 pm", config) == TimeOfDay(16)

    def test_unknown_name(self) -> None:
        """Text that is not a name fails to match."""
        with pytest.raises(ParseMismatchError):
            parse("d MMM yyyy", "14 Nox 1974")


class TestCrossChecks:
    """Tests for fields that must agree with each other."""

    def test_weekday_matches(self) -> None:
        """A correct weekday is accepted."""
        assert parse("EEE yyyy-MM-dd", "Thu 1974-11-14") == CalendarDate(1974, 11, 14)

    def test_weekday_conflict(self) -> None:
        """November 14, 1974 was not a Monday."""
        with pytest.raises(InvalidDateValueError, match="day of week"):
            parse("EEE yyyy-MM-dd", "Mon 1974-11-14")

    def test_ampm_conflict(self) -> None:
        """A 24-hour afternoon hour contradicts AM."""
        with pytest.raises(InvalidDateValueError, match="AM/PM"):
            parse("HH:mm a", "16:21 AM")

    def test_ampm_consistent(self) -> None:
        """A 24-hour hour agreeing with the marker is accepted."""
        assert parse("HH:mm a", "16:21 PM") == TimeOfDay(16, 21)

    def test_hour_fields_agree(self) -> None:
        """H and h may both appear when consistent."""
        assert parse("HH h a", "16 4 PM") == TimeOfDay(16)

    def test_hour_fields_conflict(self) -> None:
        """H and h must give the same hour."""
        with pytest.raises(InvalidDateValueError, match="gives hour"):
            parse("HH h a", "16 5 PM")

    @pytest.mark.parametrize(
        ("pattern", "text"),
        [("HH hh", "16 03"), ("HH K", "16 5"), ("kk:mm h", "24:00 11")],
    )
    def test_twelve_hour_field_conflict_without_marker(self, pattern: str, text: str) -> None:
        """Without a, h and K must still match the 24-hour field."""
        with pytest.raises(InvalidDateValueError, match="conflicts with"):
            parse(pattern, text)

    @pytest.mark.parametrize(
        ("pattern", "text", "expected"),
        [
            ("HH hh", "16 04", TimeOfDay(16)),
            ("HH K", "16 4", TimeOfDay(16)),
            ("HH:mm h", "00:15 12", TimeOfDay(0, 15)),
            ("HH:mm h", "12:15 12", TimeOfDay(12, 15)),
        ],
    )
    def test_twelve_hour_field_consistent_without_marker(
        self, pattern: str, text: str, expected: TimeOfDay
    ) -> None:
        """A 12-hour field agreeing with H is accepted."""
        assert parse(pattern, text) == expected

    def test_repeated_field_conflict(self) -> None:
        """A field repeated in a pattern must parse to the same value."""
        with pytest.raises(InvalidDateValueError, match="conflicting values for month"):
            parse("yyyy-MM-dd (MM)", "1974-11-14 (12)")

    def test_repeated_field_consistent(self) -> None:
        """Repeating the same value is fine."""
        assert parse("yyyy-MM-dd (MM)", "1974-11-14 (11)") == CalendarDate(1974, 11, 14)


class TestInvalidValues:
    """Tests for well-formed text naming values that do not exist."""

    def test_february_30(self) -> None:
        """2023-02-30 does not exist."""
        with pytest.raises(InvalidDateValueError, match="day must be between 1 and 28"):
            parse("yyyy-MM-dd", "2023-02-30")

    def test_month_13(self) -> None:
        """There is no thirteenth month."""
        with pytest.raises(InvalidDateValueError, match="month must be between 1 and 12"):
            parse("MM/dd/yyyy", "13/01/2024")

    def test_hour_25(self) -> None:
        """Hours stop at 23."""
        with pytest.raises(InvalidDateValueError, match="hour-of-day"):
            parse("HH:mm", "25:00")

    def test_clock_hour_zero(self) -> None:
        """h runs from 1 to 12."""
        with pytest.raises(InvalidDateValueError, match="clock-hour-of-am-pm"):
            parse("h:mm a", "0:30 AM")

    def test_year_zero(self) -> None:
        """Year 0 is before the supported range."""
        with pytest.raises(InvalidDateValueError, match="year"):
            parse("y-M-d", "0-1-1")

    def test_year_past_9999(self) -> None:
        """Five-digit years beyond 9999 are rejected."""
        with pytest.raises(InvalidDateValueError, match="year"):
            parse("yyyyy-MM-dd", "10000-01-01")


class TestParseMismatch:
    """Tests for text that does not fit the pattern."""

    @pytest.mark.parametrize(
        "text",
        [
            "1974/11/14",
            "1974-11-1",
            "74-11-14",
            "",
            "1974-11-14x",
            "1974-11-14 ",
            "١٩٧٤-11-14",
        ],
    )
    def test_mismatch(self, text: str) -> None:
        """Wrong separators, short fields, trailing text and non-ASCII digits."""
        with pytest.raises(ParseMismatchError):
            parse("yyyy-MM-dd", text)

    def test_message_reports_position(self) -> None:
        """The error points at the first mismatch."""
        with pytest.raises(ParseMismatchError, match="position 4"):
            parse("yyyy-MM-dd", "1974/11/14")

    def test_trailing_characters(self) -> None:
        """Leftover input is reported."""
        with pytest.raises(ParseMismatchError, match="trailing"):
            parse("HH:mm", "16:21:00")

    @pytest.mark.parametrize("pattern", ["MM/dd", "EEEE", "h:mm", "", "mm:ss", "yyyy HH:mm a"])
    def test_patterns_that_cannot_determine_a_value(self, pattern: str) -> None:
        """Patterns missing required fields still format but never parse."""
        with pytest.raises(ParseMismatchError, match="cannot parse"):
            parse(pattern, "anything")

    def test_rejects_non_string(self) -> None:
        """Text must be a string."""
        with pytest.raises(TypeError):
            parse("yyyy", None)  # type: ignore[arg-type]


class TestParseTemporal:
    """Tests for the parse_temporal helper."""

    def test_parses(self) -> None:
        """parse_temporal compiles and parses in one call."""
        assert parse_temporal("11/14/1974", "MM/dd/yyyy") == CalendarDate(1974, 11, 14)

    def test_with_config(self) -> None:
        """A config can be passed through."""
        config = FormatterConfig(two_digit_year_base=1900)
        assert parse_temporal("14.11.74", "dd.MM.yy", config) == CalendarDate(1974, 11, 14)
