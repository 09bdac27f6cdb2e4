"""Population-wide activity statistics."""

from datetime import datetime

from app.analytics.schemas.analytics import ActivitySummary
from app.analytics.services.base import average_daily_rate, calculate_rate
from app.analytics.services.period import Period
from app.analytics.services.sign_in_service import SIGN_IN_COUNT, SignInSeriesService
from app.analytics.stores import AttendanceEventStore, RosterStore
from app.attendance.models.attendance_event import EventType, UserType
from app.core.datetime_utils import to_naive_utc


class ActivitySummarizer:
    """Service for whole-roster activity and attendance rates."""

    def __init__(self, events: AttendanceEventStore, roster: RosterStore) -> None:
        self.events = events
        self.roster = roster
        self.sign_ins = SignInSeriesService(events)

    def summarize(self, period: Period, now: datetime) -> ActivitySummary:
        """Compute activity and average daily attendance for a period.

        Args:
            period: Resolved analysis window.
            now: Current time; days after today are left out of the daily average.

        Returns:
            ActivitySummary with roster counts and rates rounded to 2 decimals.
        """
        total_students = self.roster.roster_count(UserType.STUDENT)
        total_teachers = self.roster.roster_count(UserType.TEACHER)
        total_users = total_students + total_teachers

        active_users = len(
            self.events.distinct_users_by_range(
                EventType.SIGN_IN, period.start_date, period.end_date
            )
        )
        total_sign_ins = self.events.count_by_range(
            EventType.SIGN_IN, period.start_date, period.end_date
        )

        average_rate = 0.0
        if total_users > 0:
            daily = self.sign_ins.daily_counts(period)
            average_rate = average_daily_rate(
                daily, SIGN_IN_COUNT, total_users, to_naive_utc(now).date()
            )

        return ActivitySummary(
            totalUsers=total_users,
            activeTeachers=total_teachers,
            activeStudents=total_students,
            activeUsers=active_users,
            totalSignIns=total_sign_ins,
            overallActivityRate=calculate_rate(active_users, total_users),
            averageDailyAttendanceRate=average_rate,
        )
