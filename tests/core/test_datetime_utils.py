"""Unit tests for date helpers."""

from datetime import date, datetime

from app.core.datetime_utils import day_key, parse_day, to_naive_utc


class TestDayKey:
    """Tests for day_key."""

    def test_date_is_zero_padded(self):
        assert day_key(date(999, 1, 5)) == "0999-01-05"

    def test_datetime_keeps_only_the_date(self):
        assert day_key(datetime(2025, 4, 30, 23, 59, 59)) == "2025-04-30"

    def test_string_from_sqlite(self):
        assert day_key("0999-12-31") == "0999-12-31"
        assert day_key("2025-04-30 07:00:00") == "2025-04-30"


class TestParseDay:
    """Tests for parse_day."""

    def test_plain_date(self):
        assert parse_day("2025-04-30") == date(2025, 4, 30)

    def test_padded_early_year(self):
        assert parse_day("0999-12-30") == date(999, 12, 30)

    def test_missing_or_malformed(self):
        assert parse_day(None) is None
        assert parse_day("") is None
        assert parse_day("30/04/2025") is None


class TestToNaiveUtc:
    """Tests for to_naive_utc."""

    def test_naive_value_is_unchanged(self):
        value = datetime(2025, 4, 30, 12, 0)
        assert to_naive_utc(value) is value
