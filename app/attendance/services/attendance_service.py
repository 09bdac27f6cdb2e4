from datetime import date, datetime, time

import structlog
from sqlalchemy.orm import Session

from app.attendance.models.attendance_event import (
    AttendanceEvent,
    EventType,
    StudentRef,
    TeacherRef,
    UserRef,
    UserType,
)
from app.attendance.schemas.attendance import AttendanceRecord
from app.core.datetime_utils import END_OF_DAY
from app.core.exceptions import NotFoundError
from app.roster.models.student import Student
from app.roster.models.teacher import Teacher
from app.roster.repository import StudentRepository, TeacherRepository

logger = structlog.get_logger(__name__)


class AttendanceService:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.students = StudentRepository(db)
        self.teachers = TeacherRepository(db)

    def _find_by_code(self, code: str) -> tuple[Student | Teacher, UserRef]:
        # Students are looked up first; codes are unique within each roster
        student = self.students.find_by_code(code)
        if student is not None:
            return student, StudentRef(student.id)
        teacher = self.teachers.find_by_code(code)
        if teacher is not None:
            return teacher, TeacherRef(teacher.id)
        raise NotFoundError("User not found", resource="user")

    def _record(self, code: str, event_type: EventType, now: datetime) -> AttendanceEvent:
        person, owner = self._find_by_code(code)

        if event_type == EventType.SIGN_IN:
            person.sign_in_time = now
        else:
            person.sign_out_time = now

        event = AttendanceEvent.record(owner, event_type, now)
        self.db.add(event)
        self.db.commit()
        self.db.refresh(event)

        logger.info(
            "attendance_recorded",
            event_type=event_type.value,
            user_type=owner.user_type.value,
            user_id=str(owner.id),
        )
        return event

    def sign_in(self, code: str, now: datetime) -> AttendanceEvent:
        return self._record(code, EventType.SIGN_IN, now)

    def sign_out(self, code: str, now: datetime) -> AttendanceEvent:
        return self._record(code, EventType.SIGN_OUT, now)

    def get_records(self, day: date, user_type: UserType | None = None) -> list[AttendanceRecord]:
        """Events recorded on one calendar day, oldest first.

        Args:
            day: Calendar day to list.
            user_type: Restrict to students or teachers.

        Returns:
            Records with the owner's name resolved from the roster.
        """
        query = self.db.query(AttendanceEvent).filter(
            AttendanceEvent.timestamp >= datetime.combine(day, time.min),
            AttendanceEvent.timestamp <= datetime.combine(day, END_OF_DAY),
        )
        if user_type is not None:
            query = query.filter(AttendanceEvent.user_type == user_type)
        events = query.order_by(AttendanceEvent.timestamp.asc()).all()

        students = self.students.get_many_by_ids(
            [e.user_id for e in events if e.user_type == UserType.STUDENT]
        )
        teachers = self.teachers.get_many_by_ids(
            [e.user_id for e in events if e.user_type == UserType.TEACHER]
        )

        records = []
        for event in events:
            owner = event.owner
            roster = students if isinstance(owner, StudentRef) else teachers
            person = roster.get(owner.id)
            records.append(
                AttendanceRecord(
                    id=str(event.id),
                    userId=str(owner.id),
                    userType=owner.user_type,
                    eventType=event.event_type,
                    timestamp=event.timestamp,
                    name=person.full_name if person else None,
                )
            )
        return records
