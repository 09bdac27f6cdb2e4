"""Read-side stores consumed by the analytics services.

The services only see the two protocols below; the SQLAlchemy classes are the
production implementations and tests are free to substitute mocks. Every
per-day method is a single grouped query returning a sparse
``{"YYYY-MM-DD": count}`` mapping.
"""

from collections import Counter
from datetime import datetime
from typing import Protocol

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from app.attendance.models.attendance_event import (
    AttendanceEvent,
    EventType,
    UserRef,
    UserType,
    user_ref_from_storage,
)
from app.core.datetime_utils import day_key
from app.roster.models.student import Student
from app.roster.models.teacher import Teacher


class AttendanceEventStore(Protocol):
    def count_by_range(
        self,
        event_type: EventType,
        start: datetime,
        end: datetime,
        user_type: UserType | None = None,
    ) -> int:
        """Count raw events of a type with a timestamp in [start, end]."""
        ...

    def distinct_users_by_range(
        self,
        event_type: EventType,
        start: datetime,
        end: datetime,
        education_level: str | None = None,
    ) -> set[UserRef]:
        """Users with at least one matching event in [start, end]."""
        ...

    def count_by_day_grouped(
        self,
        event_type: EventType,
        start: datetime,
        end: datetime,
        education_level: str | None = None,
    ) -> dict[str, int]:
        """Distinct users per calendar day with a matching event in [start, end]."""
        ...


class RosterStore(Protocol):
    def roster_count(self, user_type: UserType, education_level: str | None = None) -> int:
        """Current number of students or teachers, optionally within one level."""
        ...

    def roster_created_by_day_grouped(
        self, user_type: UserType, start: datetime, end: datetime
    ) -> dict[str, int]:
        """Registrations per calendar day with created_at in [start, end]."""
        ...

    def distinct_roster_values(self, field: str) -> set[str]:
        """Distinct non-empty values of a student roster field."""
        ...


_ROSTER_MODELS: dict[UserType, type[Student] | type[Teacher]] = {
    UserType.STUDENT: Student,
    UserType.TEACHER: Teacher,
}

_DISTINCT_STUDENT_FIELDS = {
    "education_level": Student.education_level,
}


class SqlAttendanceEventStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def _scoped(
        self,
        query: Query,
        event_type: EventType,
        start: datetime,
        end: datetime,
        education_level: str | None = None,
    ) -> Query:
        query = query.select_from(AttendanceEvent).filter(
            AttendanceEvent.event_type == event_type,
            AttendanceEvent.timestamp >= start,
            AttendanceEvent.timestamp <= end,
        )
        if education_level is not None:
            query = query.join(Student, Student.id == AttendanceEvent.user_id).filter(
                AttendanceEvent.user_type == UserType.STUDENT,
                Student.education_level == education_level,
            )
        return query

    def count_by_range(
        self,
        event_type: EventType,
        start: datetime,
        end: datetime,
        user_type: UserType | None = None,
    ) -> int:
        query = self._scoped(self.db.query(func.count(AttendanceEvent.id)), event_type, start, end)
        if user_type is not None:
            query = query.filter(AttendanceEvent.user_type == user_type)
        return query.scalar() or 0

    def distinct_users_by_range(
        self,
        event_type: EventType,
        start: datetime,
        end: datetime,
        education_level: str | None = None,
    ) -> set[UserRef]:
        rows = self._scoped(
            self.db.query(AttendanceEvent.user_type, AttendanceEvent.user_id),
            event_type,
            start,
            end,
            education_level,
        ).distinct()
        return {user_ref_from_storage(user_type, user_id) for user_type, user_id in rows}

    def count_by_day_grouped(
        self,
        event_type: EventType,
        start: datetime,
        end: datetime,
        education_level: str | None = None,
    ) -> dict[str, int]:
        day = func.date(AttendanceEvent.timestamp).label("day")
        # One row per (day, user); counting rows per day gives distinct users
        # without relying on multi-column COUNT(DISTINCT ...)
        rows = self._scoped(
            self.db.query(day, AttendanceEvent.user_type, AttendanceEvent.user_id),
            event_type,
            start,
            end,
            education_level,
        ).distinct()
        return dict(Counter(day_key(row.day) for row in rows))


class SqlRosterStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def roster_count(self, user_type: UserType, education_level: str | None = None) -> int:
        model = _ROSTER_MODELS[user_type]
        query = self.db.query(func.count(model.id))
        if education_level is not None:
            if model is not Student:
                raise ValueError("education_level filter only applies to students")
            query = query.filter(Student.education_level == education_level)
        return query.scalar() or 0

    def roster_created_by_day_grouped(
        self, user_type: UserType, start: datetime, end: datetime
    ) -> dict[str, int]:
        model = _ROSTER_MODELS[user_type]
        day = func.date(model.created_at).label("day")
        rows = (
            self.db.query(day, func.count(model.id))
            .filter(model.created_at >= start, model.created_at <= end)
            .group_by(day)
            .all()
        )
        return {day_key(row[0]): row[1] for row in rows}

    def distinct_roster_values(self, field: str) -> set[str]:
        column = _DISTINCT_STUDENT_FIELDS.get(field)
        if column is None:
            raise ValueError(f"Unsupported roster field: {field}")
        rows = self.db.query(column).distinct().all()
        return {row[0] for row in rows if row[0] and row[0].strip()}
