"""
Tests for evaluating relative date-time expressions against a reference.

These tests verify field ordering, fixed-value validation and calendar
arithmetic of relative deltas.
"""

from datetime import datetime, timedelta, timezone

import pytest

import relativedatetime
from relativedatetime import Field, FieldOutOfRangeError, RelativeDateTime
from relativedatetime.evaluator import RelativeDateTimeEvaluator


@pytest.fixture
def anchor():
    return datetime(2023, 6, 15, 12, 30, 30)


class TestEvaluation:
    """Tests for the documented evaluation examples."""

    def test_relative_day_fixed_time(self, anchor):
        """Test '-1d @ 8H 30m 0s' moves back a day and sets the time."""
        result = relativedatetime.evaluate("-1d @ 8H 30m 0s", anchor)
        assert result == datetime(2023, 6, 14, 8, 30, 0)

    def test_next_year(self, anchor):
        result = relativedatetime.evaluate("+1y", anchor)
        assert result == datetime(2024, 6, 15, 12, 30, 30)

    @pytest.mark.parametrize("reference", [
        datetime(2023, 6, 15, 12, 30, 30),
        datetime(1999, 12, 31, 23, 59, 59, 999000),
        datetime(2024, 2, 29, 0, 0, 0),
        datetime(1, 1, 1),
    ])
    def test_fully_fixed_literal(self, reference):
        """A literal fixing every field ignores the reference entirely."""
        result = relativedatetime.evaluate("2023y 1M 1d 0H 0m 0s 0f", reference)
        assert result == datetime(2023, 1, 1, 0, 0, 0, 0)

    def test_accepts_parsed_expression(self, anchor):
        expr = relativedatetime.parse("+2H")
        assert relativedatetime.evaluate(expr, anchor) == datetime(2023, 6, 15, 14, 30, 30)

    def test_unset_fields_are_untouched(self):
        reference = datetime(2021, 11, 3, 4, 5, 6, 789123)
        result = relativedatetime.evaluate("17H", reference)
        assert (result.year, result.month, result.day) == (2021, 11, 3)
        assert (result.minute, result.second, result.microsecond) == (5, 6, 789123)
        assert result.hour == 17

    def test_empty_expression_returns_reference(self, anchor):
        assert RelativeDateTimeEvaluator().evaluate(RelativeDateTime(), anchor) == anchor


class TestFieldOrder:
    """Tests verifying fields are applied year first, each on the previous result."""

    def test_leap_day_after_fixed_year(self):
        """Feb 29 is valid because the year is set before the day is checked."""
        result = relativedatetime.evaluate("2024y 2M 29d", datetime(2023, 3, 15, 10, 0))
        assert result == datetime(2024, 2, 29, 10, 0)

    def test_leap_day_from_month_end(self):
        result = relativedatetime.evaluate("2024y 2M 29d", datetime(2023, 3, 31))
        assert result == datetime(2024, 2, 29)

    def test_leap_day_in_common_year(self):
        with pytest.raises(FieldOutOfRangeError) as excinfo:
            relativedatetime.evaluate("2023y 2M 29d", datetime(2024, 3, 15))
        assert excinfo.value.field is Field.DAY
        assert (excinfo.value.minimum, excinfo.value.maximum) == (1, 28)

    def test_day_checked_against_current_month(self):
        """Day 31 is rejected after the month has moved to April."""
        with pytest.raises(FieldOutOfRangeError):
            relativedatetime.evaluate("+1M 31d", datetime(2023, 3, 31))

    def test_relative_day_after_fixed_month(self):
        result = relativedatetime.evaluate("3M -1d", datetime(2024, 5, 1))
        assert result == datetime(2024, 2, 29)


class TestFixedFields:
    """Tests for fixed values and their valid ranges."""

    @pytest.mark.parametrize("literal, field, value, bounds", [
        ("13M", Field.MONTH, 13, (1, 12)),
        ("0M", Field.MONTH, 0, (1, 12)),
        ("0d", Field.DAY, 0, (1, 30)),
        ("31d", Field.DAY, 31, (1, 30)),
        ("24H", Field.HOUR, 24, (0, 23)),
        ("60m", Field.MINUTE, 60, (0, 59)),
        ("60s", Field.SECOND, 60, (0, 59)),
        ("1000f", Field.MILLISECOND, 1000, (0, 999)),
        ("0y", Field.YEAR, 0, (1, 9999)),
        ("10000y", Field.YEAR, 10000, (1, 9999)),
    ])
    def test_out_of_range(self, anchor, literal, field, value, bounds):
        with pytest.raises(FieldOutOfRangeError) as excinfo:
            relativedatetime.evaluate(literal, anchor)
        assert excinfo.value.field is field
        assert excinfo.value.value == value
        assert (excinfo.value.minimum, excinfo.value.maximum) == bounds

    def test_out_of_range_message(self, anchor):
        with pytest.raises(FieldOutOfRangeError, match=r"Month value 13 is not within the valid range \(1 - 12\)"):
            relativedatetime.evaluate("13M", anchor)

    def test_fixed_month_clamps_day(self):
        result = relativedatetime.evaluate("2M", datetime(2023, 1, 31, 9, 0))
        assert result == datetime(2023, 2, 28, 9, 0)

    def test_fixed_year_from_leap_day(self):
        result = relativedatetime.evaluate("2023y", datetime(2024, 2, 29))
        assert result == datetime(2023, 2, 28)

    def test_fixed_millisecond_keeps_microseconds(self):
        result = relativedatetime.evaluate("250f", datetime(2023, 6, 15, 12, 30, 30, 123456))
        assert result.microsecond == 250456

    def test_extreme_years(self, anchor):
        assert relativedatetime.evaluate("1y", anchor).year == 1
        assert relativedatetime.evaluate("9999y", anchor).year == 9999


class TestRelativeFields:
    """Tests for signed deltas."""

    def test_month_end_clamping(self):
        assert relativedatetime.evaluate("+1M", datetime(2023, 1, 31)) == datetime(2023, 2, 28)

    def test_negative_hours_cross_midnight(self, anchor):
        assert relativedatetime.evaluate("-13H", anchor) == datetime(2023, 6, 14, 23, 30, 30)

    def test_milliseconds_carry_into_seconds(self, anchor):
        result = relativedatetime.evaluate("+1500f", anchor)
        assert result == anchor + timedelta(seconds=1, milliseconds=500)

    def test_large_minute_delta(self, anchor):
        assert relativedatetime.evaluate("+1440m", anchor) == datetime(2023, 6, 16, 12, 30, 30)

    @pytest.mark.parametrize("literal", ["+8000y", "-3000y", "+99999999999d", "-2023y"])
    def test_leaving_supported_range(self, anchor, literal):
        with pytest.raises(FieldOutOfRangeError) as excinfo:
            relativedatetime.evaluate(literal, anchor)
        assert excinfo.value.minimum is None
        assert "out of the supported range" in str(excinfo.value)


class TestReference:
    """Tests for the reference used when none is given."""

    def test_relative_base_setting(self, anchor):
        result = relativedatetime.evaluate("+1d", settings={"RELATIVE_BASE": anchor})
        assert result == datetime(2023, 6, 16, 12, 30, 30)

    def test_explicit_reference_wins_over_setting(self, anchor):
        result = relativedatetime.evaluate(
            "+1d", datetime(2020, 1, 1), settings={"RELATIVE_BASE": anchor}
        )
        assert result == datetime(2020, 1, 2)

    def test_current_time(self):
        result = relativedatetime.evaluate("0H 0m 0s 0f")
        assert (result.hour, result.minute, result.second) == (0, 0, 0)
        assert result.microsecond < 1000
        assert result.tzinfo is None

    def test_current_time_timezone_aware(self):
        result = relativedatetime.evaluate("+0d", settings={"RETURN_AS_TIMEZONE_AWARE": True})
        assert result.tzinfo is not None

    def test_aware_reference_keeps_tzinfo(self):
        reference = datetime(2023, 6, 15, 12, 0, tzinfo=timezone.utc)
        result = relativedatetime.evaluate("+1d 8H", reference)
        assert result == datetime(2023, 6, 16, 8, 0, tzinfo=timezone.utc)
        assert result.tzinfo is timezone.utc


class TestNormalization:
    """Re-parsing the canonical form evaluates to the same datetime."""

    @pytest.mark.parametrize("literal", [
        "-1d @ 8H 30m 0s",
        "+1y",
        "2023y 1M 1d 0H 0m 0s 0f",
        "30m -1d +2y",
        "+0d 5f",
        "1d 5d -2H 42",
        "2024y 2M 29d",
    ])
    def test_normalized_literal_evaluates_the_same(self, anchor, literal):
        expr = relativedatetime.parse(literal)
        normalized = relativedatetime.parse(str(expr))
        assert normalized.evaluate(anchor) == expr.evaluate(anchor)


class TestWideValues:
    """Values longer than Python's int/str conversion limit fail on range, not conversion."""

    def test_wide_fixed_year(self, anchor):
        with pytest.raises(FieldOutOfRangeError) as excinfo:
            relativedatetime.evaluate("1" * 5000 + "y", anchor)
        assert excinfo.value.field is Field.YEAR
        assert excinfo.value.value == (10 ** 5000 - 1) // 9
        assert str(excinfo.value).startswith("Year value 1111")

    @pytest.mark.parametrize("symbol", ["y", "M", "d", "H", "f"])
    def test_wide_relative_value(self, anchor, symbol):
        expr = relativedatetime.try_parse("+" + "1" * 5000 + symbol)
        with pytest.raises(FieldOutOfRangeError, match="out of the supported range"):
            relativedatetime.evaluate(expr, anchor)


class TestArguments:
    """Tests for values that are not expressions."""

    def test_none_expression(self, anchor):
        """Evaluating the None returned by try_parse on a bad literal."""
        with pytest.raises(TypeError, match="expression must be a RelativeDateTime"):
            relativedatetime.evaluate(relativedatetime.try_parse("5z"), anchor)

    @pytest.mark.parametrize("expression", [42, b"+1d", {"day": 1}])
    def test_other_types(self, anchor, expression):
        with pytest.raises(TypeError):
            relativedatetime.evaluate(expression, anchor)

    def test_evaluator_rejects_literal(self, anchor):
        with pytest.raises(TypeError):
            RelativeDateTimeEvaluator().evaluate("+1d", anchor)
