"""Unit tests for the synthetic attendance generator."""

import random
import uuid
from datetime import date, timedelta

from app.attendance.models.attendance_event import EventType, StudentRef
from app.scripts.seed_attendance import generate_attendance_events


class TestGenerateAttendanceEvents:
    """Tests for generate_attendance_events."""

    def test_only_class_days_get_events(self):
        owners = [StudentRef(uuid.uuid4())]

        # 2025-04-21 is a Monday
        events = generate_attendance_events(
            owners, date(2025, 4, 21), date(2025, 4, 27), random.Random(1)
        )

        days = sorted({e.timestamp.date() for e in events})
        assert days == [date(2025, 4, 21), date(2025, 4, 23), date(2025, 4, 25)]
        assert len(events) == 6

    def test_times_vary_within_window_and_sign_out_follows_sign_in(self):
        owners = [StudentRef(uuid.uuid4()) for _ in range(5)]

        events = generate_attendance_events(
            owners, date(2025, 4, 21), date(2025, 5, 4), random.Random(7)
        )

        pairs = list(zip(events[::2], events[1::2]))
        assert len(pairs) == 5 * 6
        for signed_in, signed_out in pairs:
            assert signed_in.event_type == EventType.SIGN_IN
            assert signed_out.event_type == EventType.SIGN_OUT
            assert signed_in.user_id == signed_out.user_id
            assert signed_out.timestamp > signed_in.timestamp
            day_start = signed_in.timestamp.replace(hour=7, minute=0)
            assert abs(signed_in.timestamp - day_start) <= timedelta(minutes=25)

    def test_same_seed_is_reproducible(self):
        owners = [StudentRef(uuid.uuid4())]

        first = generate_attendance_events(owners, date(2025, 4, 21), date(2025, 4, 25), random.Random(3))
        second = generate_attendance_events(owners, date(2025, 4, 21), date(2025, 4, 25), random.Random(3))

        assert [e.timestamp for e in first] == [e.timestamp for e in second]

    def test_no_owners(self):
        assert generate_attendance_events([], date(2025, 4, 21), date(2025, 4, 25), random.Random()) == []
