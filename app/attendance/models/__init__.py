"""Attendance models."""

from app.attendance.models.attendance_event import (
    AttendanceEvent,
    EventType,
    StudentRef,
    TeacherRef,
    UserRef,
    UserType,
    user_ref_from_storage,
)

__all__ = [
    "AttendanceEvent",
    "EventType",
    "StudentRef",
    "TeacherRef",
    "UserRef",
    "UserType",
    "user_ref_from_storage",
]
