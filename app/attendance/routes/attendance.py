"""Kiosk sign-in/sign-out and daily attendance records."""

from datetime import datetime

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.attendance.models.attendance_event import UserType
from app.attendance.schemas.attendance import (
    AttendanceRecordsResponse,
    SignActionResponse,
)
from app.attendance.services.attendance_service import AttendanceService
from app.core.datetime_utils import parse_day
from app.core.dependencies import get_now
from app.core.exceptions import ValidationError
from app.db.session import get_db

router = APIRouter(prefix="/attendance", tags=["admin-attendance"])


@router.post("/sign-in/{code}", response_model=SignActionResponse)
async def sign_in(
    code: str,
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
) -> SignActionResponse:
    """Record a sign-in for the student or teacher holding ``code``."""
    event = AttendanceService(db).sign_in(code, now)
    return SignActionResponse(
        message="Sign in successful",
        userType=event.user_type,
        eventType=event.event_type,
        timestamp=event.timestamp,
    )


@router.post("/sign-out/{code}", response_model=SignActionResponse)
async def sign_out(
    code: str,
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
) -> SignActionResponse:
    """Record a sign-out for the student or teacher holding ``code``."""
    event = AttendanceService(db).sign_out(code, now)
    return SignActionResponse(
        message="Sign out successful",
        userType=event.user_type,
        eventType=event.event_type,
        timestamp=event.timestamp,
    )


@router.get("/records", response_model=AttendanceRecordsResponse)
async def get_attendance_records(
    date: str | None = Query(None, description="Day in YYYY-MM-DD format"),
    user_type: UserType | None = Query(None, alias="userType", description="Student or Teacher"),
    db: Session = Depends(get_db),
) -> AttendanceRecordsResponse:
    """
    Get every sign-in and sign-out recorded on a day.

    Returns:
    - The day queried
    - Records ordered by time, with the owner's name
    """
    if not date:
        raise ValidationError("Date is required", field="date")
    day = parse_day(date)
    if day is None:
        raise ValidationError("Invalid date format. Use YYYY-MM-DD.", field="date")

    records = AttendanceService(db).get_records(day, user_type)
    return AttendanceRecordsResponse(date=day.isoformat(), attendanceRecords=records)
