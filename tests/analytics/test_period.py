"""Unit tests for period resolution."""

from datetime import date, datetime, timedelta, timezone

import pytest

from app.analytics.services.period import (
    Period,
    PeriodKeyword,
    get_period_boundaries,
    resolve_period,
)
from app.core.config import settings
from app.core.exceptions import ValidationError

NOW = datetime(2025, 4, 30, 15, 0, 0)
TODAY = date(2025, 4, 30)


class TestGetPeriodBoundaries:
    """Tests for keyword to calendar day conversion."""

    def test_last_7_days_includes_today_and_seven_days_back(self):
        assert get_period_boundaries("last7days", TODAY) == (date(2025, 4, 23), TODAY)

    def test_last_30_days(self):
        assert get_period_boundaries("last30days", TODAY) == (date(2025, 3, 31), TODAY)

    def test_this_month_runs_to_end_of_month(self):
        assert get_period_boundaries("thisMonth", date(2025, 2, 10)) == (
            date(2025, 2, 1),
            date(2025, 2, 28),
        )

    def test_last_6_months_starts_five_months_back(self):
        assert get_period_boundaries("last6months", TODAY) == (date(2024, 11, 1), TODAY)

    def test_last_12_months_crosses_year(self):
        assert get_period_boundaries("last12months", date(2025, 1, 15)) == (
            date(2024, 2, 1),
            date(2025, 1, 31),
        )

    def test_accepts_enum_members(self):
        assert get_period_boundaries(PeriodKeyword.LAST_7_DAYS, TODAY) == (
            date(2025, 4, 23),
            TODAY,
        )

    @pytest.mark.parametrize("keyword", [None, "", "lastWeek", "LAST7DAYS"])
    def test_unknown_keyword_falls_back_to_last_30_days(self, keyword):
        assert get_period_boundaries(keyword, TODAY) == (date(2025, 3, 31), TODAY)


class TestResolvePeriod:
    """Tests for resolve_period."""

    def test_last_7_days_spans_eight_calendar_dates(self):
        period = resolve_period("last7days", now=NOW)

        assert period.start_date == datetime(2025, 4, 23, 0, 0, 0)
        assert period.end_date == datetime(2025, 4, 30, 23, 59, 59, 999000)
        assert len(period.days()) == 8

    def test_custom_dates_take_precedence_over_keyword(self):
        period = resolve_period("last7days", "2025-01-01", "2025-01-31", now=NOW)

        assert period.as_dict() == {"startDate": "2025-01-01", "endDate": "2025-01-31"}
        assert period.end_date.time() == datetime(2025, 1, 31, 23, 59, 59, 999000).time()

    def test_custom_single_day(self):
        period = resolve_period(None, "2025-04-10", "2025-04-10", now=NOW)

        assert period.days() == [date(2025, 4, 10)]

    def test_custom_iso_datetimes_keep_only_the_date(self):
        period = resolve_period(None, "2025-04-01T10:30:00Z", "2025-04-02T08:00:00Z", now=NOW)

        assert period.as_dict() == {"startDate": "2025-04-01", "endDate": "2025-04-02"}
        assert period.start_date.time() == datetime.min.time()

    def test_only_one_custom_date_uses_keyword(self):
        period = resolve_period("thisMonth", "2025-01-01", None, now=NOW)

        assert period.as_dict() == {"startDate": "2025-04-01", "endDate": "2025-04-30"}

    def test_malformed_custom_date_uses_keyword(self):
        period = resolve_period("last7days", "not-a-date", "2025-04-30", now=NOW)

        assert period.as_dict() == {"startDate": "2025-04-23", "endDate": "2025-04-30"}

    def test_reversed_custom_range_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            resolve_period(None, "2025-04-30", "2025-04-01", now=NOW)

        assert exc_info.value.status_code == 400
        assert exc_info.value.details == {"field": "startDate"}

    def test_longest_allowed_custom_range(self):
        first = date(2024, 1, 1)
        last = first + timedelta(days=settings.MAX_ANALYTICS_DAYS - 1)

        period = resolve_period(None, first.isoformat(), last.isoformat(), now=NOW)

        assert len(period.days()) == settings.MAX_ANALYTICS_DAYS

    def test_custom_range_longer_than_limit_is_rejected(self):
        first = date(2024, 1, 1)
        last = first + timedelta(days=settings.MAX_ANALYTICS_DAYS)

        with pytest.raises(ValidationError) as exc_info:
            resolve_period(None, first.isoformat(), last.isoformat(), now=NOW)

        assert exc_info.value.status_code == 400
        assert exc_info.value.details == {"field": "startDate"}

    def test_whole_calendar_range_is_rejected(self):
        with pytest.raises(ValidationError):
            resolve_period(None, "0001-01-01", "9999-12-31", now=NOW)

    def test_aware_now_is_converted_to_utc_day(self):
        # 23:30 at UTC-5 is already the next day in UTC
        now = datetime(2025, 4, 30, 23, 30, tzinfo=timezone(timedelta(hours=-5)))

        period = resolve_period("last7days", now=now)

        assert period.last_day == date(2025, 5, 1)


class TestPeriod:
    """Tests for the Period value object."""

    def test_as_dict_pads_early_years(self):
        period = resolve_period(None, "0999-12-30", "1000-01-02", now=NOW)

        assert period.as_dict() == {"startDate": "0999-12-30", "endDate": "1000-01-02"}
        assert len(period.days()) == 4

    def test_start_after_end_is_invalid(self):
        with pytest.raises(ValueError):
            Period(start_date=datetime(2025, 4, 2), end_date=datetime(2025, 4, 1))
