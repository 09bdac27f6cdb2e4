from pydantic import BaseModel, Field

from app.attendance.models.attendance_event import EventType, UserType
from app.core.datetime_utils import UTCDatetime


class SignActionResponse(BaseModel):
    """Result of a kiosk sign-in or sign-out."""

    success: bool = True
    message: str
    userType: UserType
    eventType: EventType
    timestamp: UTCDatetime


class AttendanceRecord(BaseModel):
    id: str
    userId: str
    userType: UserType
    eventType: EventType
    timestamp: UTCDatetime
    name: str | None = Field(None, description="Owner's full name, if still on the roster")


class AttendanceRecordsResponse(BaseModel):
    success: bool = True
    date: str = Field(description="Day the records were taken from (YYYY-MM-DD)")
    attendanceRecords: list[AttendanceRecord]
