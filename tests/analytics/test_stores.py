"""Tests for the SQLAlchemy analytics stores against SQLite."""

from datetime import datetime

import pytest

from app.analytics.stores import SqlAttendanceEventStore, SqlRosterStore
from app.attendance.models.attendance_event import EventType, StudentRef, TeacherRef, UserType
from tests.utils.factories import (
    create_attendance_event,
    create_student_factory,
    create_teacher_factory,
)

START = datetime(2025, 4, 28, 0, 0, 0)
END = datetime(2025, 4, 30, 23, 59, 59, 999000)


@pytest.fixture
def roster(db_session):
    primary = create_student_factory(
        db_session, education_level="Primary", created_at=datetime(2025, 4, 28, 9, 0)
    )
    secondary = create_student_factory(
        db_session, education_level="Secondary", created_at=datetime(2025, 4, 28, 10, 0)
    )
    teacher = create_teacher_factory(db_session, created_at=datetime(2025, 4, 30, 8, 0))
    return {"primary": primary, "secondary": secondary, "teacher": teacher}


@pytest.fixture
def events(db_session, roster):
    primary, secondary, teacher = roster["primary"], roster["secondary"], roster["teacher"]
    # primary signs in twice on the 28th
    create_attendance_event(db_session, primary, datetime(2025, 4, 28, 7, 0))
    create_attendance_event(db_session, primary, datetime(2025, 4, 28, 13, 0))
    create_attendance_event(
        db_session, primary, datetime(2025, 4, 28, 12, 0), event_type=EventType.SIGN_OUT
    )
    create_attendance_event(db_session, secondary, datetime(2025, 4, 29, 7, 5))
    create_attendance_event(db_session, teacher, datetime(2025, 4, 28, 6, 50))
    create_attendance_event(db_session, teacher, datetime(2025, 4, 30, 23, 59, 59, 999000))
    # outside the window
    create_attendance_event(db_session, secondary, datetime(2025, 4, 27, 23, 59, 59))
    create_attendance_event(db_session, teacher, datetime(2025, 5, 1, 0, 0, 0))
    return roster


class TestSqlAttendanceEventStore:
    """Tests for event queries."""

    def test_count_by_range_counts_raw_events(self, db_session, events):
        store = SqlAttendanceEventStore(db_session)

        assert store.count_by_range(EventType.SIGN_IN, START, END) == 5
        assert store.count_by_range(EventType.SIGN_OUT, START, END) == 1
        assert store.count_by_range(EventType.SIGN_IN, START, END, user_type=UserType.TEACHER) == 2

    def test_distinct_users_by_range(self, db_session, events):
        store = SqlAttendanceEventStore(db_session)

        users = store.distinct_users_by_range(EventType.SIGN_IN, START, END)

        assert users == {
            StudentRef(events["primary"].id),
            StudentRef(events["secondary"].id),
            TeacherRef(events["teacher"].id),
        }

    def test_distinct_users_by_education_level(self, db_session, events):
        store = SqlAttendanceEventStore(db_session)

        users = store.distinct_users_by_range(
            EventType.SIGN_IN, START, END, education_level="Primary"
        )

        assert users == {StudentRef(events["primary"].id)}

    def test_count_by_day_grouped_counts_distinct_users(self, db_session, events):
        store = SqlAttendanceEventStore(db_session)

        counts = store.count_by_day_grouped(EventType.SIGN_IN, START, END)

        assert counts == {"2025-04-28": 2, "2025-04-29": 1, "2025-04-30": 1}

    def test_count_by_day_grouped_by_education_level(self, db_session, events):
        store = SqlAttendanceEventStore(db_session)

        counts = store.count_by_day_grouped(
            EventType.SIGN_IN, START, END, education_level="Secondary"
        )

        assert counts == {"2025-04-29": 1}

    def test_empty_store(self, db_session):
        store = SqlAttendanceEventStore(db_session)

        assert store.count_by_day_grouped(EventType.SIGN_IN, START, END) == {}
        assert store.distinct_users_by_range(EventType.SIGN_IN, START, END) == set()
        assert store.count_by_range(EventType.SIGN_IN, START, END) == 0


class TestSqlRosterStore:
    """Tests for roster queries."""

    def test_roster_count(self, db_session, roster):
        store = SqlRosterStore(db_session)

        assert store.roster_count(UserType.STUDENT) == 2
        assert store.roster_count(UserType.TEACHER) == 1
        assert store.roster_count(UserType.STUDENT, education_level="Primary") == 1
        assert store.roster_count(UserType.STUDENT, education_level="College") == 0

    def test_education_level_filter_rejected_for_teachers(self, db_session):
        store = SqlRosterStore(db_session)

        with pytest.raises(ValueError):
            store.roster_count(UserType.TEACHER, education_level="Primary")

    def test_roster_created_by_day_grouped(self, db_session, roster):
        create_student_factory(db_session, created_at=datetime(2025, 5, 2, 9, 0))
        store = SqlRosterStore(db_session)

        assert store.roster_created_by_day_grouped(UserType.STUDENT, START, END) == {
            "2025-04-28": 2
        }
        assert store.roster_created_by_day_grouped(UserType.TEACHER, START, END) == {
            "2025-04-30": 1
        }

    def test_distinct_roster_values_skips_blank(self, db_session, roster):
        create_student_factory(db_session, education_level="  ")
        create_student_factory(db_session, education_level="Primary")
        store = SqlRosterStore(db_session)

        assert store.distinct_roster_values("education_level") == {"Primary", "Secondary"}

    @pytest.mark.parametrize("field", ["email", "section", "grade_year_level"])
    def test_distinct_roster_values_unsupported_field(self, db_session, field):
        with pytest.raises(ValueError, match="Unsupported roster field"):
            SqlRosterStore(db_session).distinct_roster_values(field)
