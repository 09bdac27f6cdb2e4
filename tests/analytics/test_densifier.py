"""Unit tests for the daily series densifier."""

from datetime import date

import pytest

from app.analytics.services.densifier import DailyBucket, densify
from app.analytics.services.period import Period

PERIOD = Period.from_dates(date(2025, 4, 28), date(2025, 4, 30))


class TestDensify:
    """Tests for densify."""

    def test_empty_series_yields_zero_bucket_per_day(self):
        buckets = densify(PERIOD, [], ["signInCount"])

        assert [b.as_dict() for b in buckets] == [
            {"date": "2025-04-28", "signInCount": 0},
            {"date": "2025-04-29", "signInCount": 0},
            {"date": "2025-04-30", "signInCount": 0},
        ]

    def test_merges_sparse_values_into_matching_days(self):
        buckets = densify(PERIOD, [("signInCount", {"2025-04-29": 4})], ["signInCount"])

        assert [b["signInCount"] for b in buckets] == [0, 4, 0]

    def test_accepts_date_keys(self):
        buckets = densify(PERIOD, [("signInCount", {date(2025, 4, 30): 2})], ["signInCount"])

        assert buckets[-1] == DailyBucket(date="2025-04-30", counters={"signInCount": 2})

    def test_multiple_series_with_total(self):
        buckets = densify(
            PERIOD,
            [
                ("newStudents", {"2025-04-28": 3, "2025-04-30": 1}),
                ("newTeachers", {"2025-04-28": 1}),
            ],
            ["newStudents", "newTeachers"],
            total_name="totalNewUsers",
        )

        assert buckets[0].as_dict() == {
            "date": "2025-04-28",
            "newStudents": 3,
            "newTeachers": 1,
            "totalNewUsers": 4,
        }
        assert buckets[1]["totalNewUsers"] == 0
        assert buckets[2]["totalNewUsers"] == 1

    def test_unknown_counter_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown counter"):
            densify(PERIOD, [("signOutCount", {"2025-04-28": 1})], ["signInCount"])

    def test_day_outside_period_gets_its_own_bucket(self):
        buckets = densify(
            PERIOD,
            [("signInCount", {"2025-04-27": 5, "2025-04-29": 1})],
            ["signInCount"],
        )

        assert [b.date for b in buckets] == [
            "2025-04-27",
            "2025-04-28",
            "2025-04-29",
            "2025-04-30",
        ]
        assert buckets[0]["signInCount"] == 5

    def test_output_spans_month_boundary_in_order(self):
        period = Period.from_dates(date(2025, 1, 30), date(2025, 2, 2))

        buckets = densify(period, [], ["signInCount"])

        assert [b.date for b in buckets] == [
            "2025-01-30",
            "2025-01-31",
            "2025-02-01",
            "2025-02-02",
        ]

    def test_period_crossing_year_1000_stays_dense_and_ordered(self):
        period = Period.from_dates(date(999, 12, 30), date(1000, 1, 2))

        buckets = densify(period, [("signInCount", {"0999-12-31": 3})], ["signInCount"])

        assert [b.date for b in buckets] == [
            "0999-12-30",
            "0999-12-31",
            "1000-01-01",
            "1000-01-02",
        ]
        assert [b["signInCount"] for b in buckets] == [0, 3, 0, 0]
