"""Tests for lenient string coercion"""

from datetime import date, datetime, time

import pytest

from stringext.coercion import (
    DEFAULT_DATETIME,
    to_boolean,
    to_datetime,
    to_integer,
    to_long,
    to_short,
)


class TestToBoolean:

    @pytest.mark.parametrize("value", ["TRUE", "true", "yes", "Ok", "1", "да", "ДА"])
    def test_truthy_tokens(self, value):
        assert to_boolean(value) is True

    @pytest.mark.parametrize("value", ["no", "", "false", "0", " yes", "y", None])
    def test_everything_else_is_false(self, value):
        assert to_boolean(value) is False


class TestIntegerCoercion:

    # ========== Parsing ==========

    def test_plain_number(self):
        assert to_integer("42") == 42

    def test_sign_and_whitespace(self):
        """Leading sign and surrounding whitespace are allowed"""
        assert to_integer(" -7 ") == -7
        assert to_integer("+15") == 15

    # ========== Defaults ==========

    @pytest.mark.parametrize("value", ["abc", "", "4.2", "1_000", "1,000", "12abc", None])
    def test_unparsable_gives_zero(self, value):
        assert to_integer(value) == 0

    def test_non_ascii_digits_rejected(self):
        """Arabic-Indic digits are not accepted even though int() would"""
        assert to_integer("٤٢") == 0

    # ========== Widths ==========

    def test_short_range(self):
        assert to_short("32767") == 32767
        assert to_short("-32768") == -32768
        assert to_short("40000") == 0

    def test_integer_range(self):
        assert to_integer("2147483647") == 2147483647
        assert to_integer("2147483648") == 0

    def test_long_range(self):
        assert to_long("9223372036854775807") == 9223372036854775807
        assert to_long("-9223372036854775808") == -9223372036854775808
        assert to_long("9223372036854775808") == 0

    def test_default_is_logged(self, caplog):
        with caplog.at_level("DEBUG", logger="stringext.coercion"):
            to_integer("abc")
        assert "defaulting to 0" in caplog.text


class TestToDatetime:

    def test_iso_date(self):
        assert to_datetime("2013-05-21") == datetime(2013, 5, 21)

    def test_iso_datetime(self):
        assert to_datetime("2013-05-21T14:30:00") == datetime(2013, 5, 21, 14, 30)

    def test_day_first_with_dots(self):
        assert to_datetime("21.05.2013") == datetime(2013, 5, 21)
        assert to_datetime("21.05.2013 08:15") == datetime(2013, 5, 21, 8, 15)

    def test_month_first_with_slashes(self):
        """05/21/2013 cannot be day-first, so the month-first format applies"""
        assert to_datetime("05/21/2013") == datetime(2013, 5, 21)

    def test_bare_time_uses_today(self):
        """A time without a date is placed on the current day"""
        assert to_datetime("10:30") == datetime.combine(date.today(), time(10, 30))
        assert to_datetime("10:30:15") == datetime.combine(date.today(), time(10, 30, 15))
        assert to_datetime("2:05 PM") == datetime.combine(date.today(), time(14, 5))

    def test_month_name(self):
        assert to_datetime("May 21, 2013") == datetime(2013, 5, 21)

    @pytest.mark.parametrize("value", ["garbage", "", "   ", "32.13.2013", None])
    def test_unparsable_gives_default(self, value):
        assert to_datetime(value) == DEFAULT_DATETIME

    def test_default_is_min_datetime(self):
        assert DEFAULT_DATETIME == datetime(1, 1, 1, 0, 0, 0)
