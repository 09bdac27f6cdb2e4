"""Per-education-level activity statistics."""

from datetime import date, datetime

from app.analytics.schemas.analytics import EducationLevelBreakdown
from app.analytics.services.base import average_daily_rate, calculate_rate
from app.analytics.services.period import Period
from app.analytics.services.sign_in_service import SIGN_IN_COUNT, SignInSeriesService
from app.analytics.stores import AttendanceEventStore, RosterStore
from app.attendance.models.attendance_event import EventType, UserType
from app.core.datetime_utils import to_naive_utc

EDUCATION_LEVEL_FIELD = "education_level"


class EducationLevelService:
    """Service for activity and attendance broken down by education level."""

    def __init__(self, events: AttendanceEventStore, roster: RosterStore) -> None:
        self.events = events
        self.roster = roster
        self.sign_ins = SignInSeriesService(events)

    def breakdown(self, period: Period, now: datetime) -> list[EducationLevelBreakdown]:
        """Get one breakdown per education level found on the student roster.

        Args:
            period: Resolved analysis window.
            now: Current time; days after today are left out of the daily average.

        Returns:
            Breakdowns ordered by education level name.
        """
        today = to_naive_utc(now).date()
        levels = sorted(self.roster.distinct_roster_values(EDUCATION_LEVEL_FIELD))
        return [self._level_breakdown(level, period, today) for level in levels]

    def _level_breakdown(self, level: str, period: Period, today: date) -> EducationLevelBreakdown:
        total_students = self.roster.roster_count(UserType.STUDENT, education_level=level)
        if total_students == 0:
            return EducationLevelBreakdown(
                educationLevel=level,
                totalStudents=0,
                activeStudents=0,
                activityRate=0.0,
                averageDailyAttendanceRate=0.0,
            )

        active_students = len(
            self.events.distinct_users_by_range(
                EventType.SIGN_IN,
                period.start_date,
                period.end_date,
                education_level=level,
            )
        )
        daily = self.sign_ins.daily_counts(period, education_level=level)

        return EducationLevelBreakdown(
            educationLevel=level,
            totalStudents=total_students,
            activeStudents=active_students,
            activityRate=calculate_rate(active_students, total_students),
            averageDailyAttendanceRate=average_daily_rate(
                daily, SIGN_IN_COUNT, total_students, today
            ),
        )
